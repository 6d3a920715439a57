"""ユニットテスト共通フィクスチャ"""

import json

import pytest

from fakes import FakeTransport, make_candidate


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def geocodio_body() -> str:
    """正常なGeocodioレスポンス（候補1件）"""
    return json.dumps(
        {
            "input": {
                "address_components": {
                    "number": "1109",
                    "predirectional": "N",
                    "street": "Highland",
                    "suffix": "St",
                    "city": "Arlington",
                    "state": "VA",
                },
                "formatted_address": "1109 N Highland St, Arlington VA",
            },
            "results": [make_candidate()],
        }
    )
