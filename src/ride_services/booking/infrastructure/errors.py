from botocore.exceptions import ClientError

from ride_services.shared.domain.result import UNKNOWN_ERROR


def describe_error(error: Exception) -> str:
    """例外を呼び出し元へ返すエラーメッセージに変換する"""
    if isinstance(error, ClientError):
        message = error.response.get("Error", {}).get("Message")
        if message:
            return message
    return str(error) or error.__class__.__name__ or UNKNOWN_ERROR


def is_duplicate_key_error(error: ClientError) -> bool:
    """PostgreSQL の一意制約違反かどうか"""
    message = error.response.get("Error", {}).get("Message", "")
    return "duplicate key value violates unique constraint" in message
