from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordHash:
    """ハッシュ化済みパスワード

    平文のパスワードは保持しない。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Password hash cannot be empty")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "PasswordHash(***)"
