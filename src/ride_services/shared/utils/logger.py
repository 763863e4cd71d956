from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名付きの構造化ロガーを返す

    service_name を省略した場合は POWERTOOLS_SERVICE_NAME に従う。
    """
    return Logger(service=service_name)
