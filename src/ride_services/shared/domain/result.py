from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """操作結果

    呼び出し元へ例外を送出する代わりに、成功/失敗をデータとして返す。
    失敗時の error は常に空でない文字列。
    """

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> Result[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str | None, data: T | None = None) -> Result[T]:
        return cls(success=False, data=data, error=error or UNKNOWN_ERROR)
