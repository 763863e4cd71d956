from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    数値として解釈できない値は ValueError とする。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool) or v is None:
        raise ValueError(f"Not a decimal number: {v!r}")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal number: {v!r}") from e
