class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（主キー制約違反）"""

    pass


class MalformedRecordException(DomainException):
    """永続化層から取得したレコードがスキーマに合致しない場合"""

    pass
