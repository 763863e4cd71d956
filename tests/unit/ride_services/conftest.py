from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_client():
    """rds-data クライアントのモックフィクスチャ"""
    return MagicMock()
