import json
import os
from dataclasses import dataclass

import pytest

# ハンドラモジュールは import 時に boto3 クライアントを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking")


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-handler"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-handler"
    )
    aws_request_id: str = "request-1"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (payload v2) イベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        query: dict | None = None,
        path: dict | None = None,
        method: str = "GET",
        raw_path: str = "/bookings",
    ) -> dict:
        return {
            "version": "2.0",
            "routeKey": f"{method} {raw_path}",
            "rawPath": raw_path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path,
            "requestContext": {
                "http": {"method": method, "path": raw_path},
                "requestId": "request-1",
                "stage": "$default",
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
