"""도메인 예외 베이스 클래스."""


class DomainError(Exception):
    """모든 도메인 예외의 베이스 클래스.

    릴리스 훅에서 발생하는 모든 실패는 이 예외로 표현되며,
    호출자(릴리스 오케스트레이터, CLI)에게 그대로 전파됩니다.
    """

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
