"""
Tests for the HTTP adapters (path style and query style).
"""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient
from starlette.routing import Router

from autocrud.contracts.types import EndpointTypes
from autocrud.handlers import create_endpoints, create_query_endpoints


@pytest.fixture
def path_client(sample_rt):
    """Client for a FastAPI app with path-style endpoints at /test."""
    router = APIRouter()
    create_endpoints(sample_rt, EndpointTypes.ALL, "/test", router)
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def query_client(sample_rt):
    """Client for a Starlette router with query-style endpoints at /test."""
    router = Router()
    create_query_endpoints(sample_rt, EndpointTypes.ALL, "/test", router)
    return TestClient(router)


class TestPathStyleFlow:
    """End-to-end scenario through the path-style endpoints."""

    def test_basic_function(self, path_client):
        """Test create, list, read, update, read, delete, read."""
        resp = path_client.post("/test", content='{"String": "test", "Int": 5}')
        assert resp.status_code == 200
        assert resp.content == b""

        resp = path_client.get("/test")
        assert resp.status_code == 200
        assert resp.json() == {
            "Page": 0,
            "Limit": 0,
            "Total": 1,
            "Data": [{"ID": 1, "String": "test", "Int": 5}],
        }

        resp = path_client.get("/test/1")
        assert resp.status_code == 200
        assert resp.json() == {"ID": 1, "String": "test", "Int": 5}

        resp = path_client.put("/test/1", content='{"Int": 10}')
        assert resp.status_code == 200
        assert resp.content == b""

        resp = path_client.get("/test/1")
        assert resp.status_code == 200
        assert resp.json() == {"ID": 1, "String": "test", "Int": 10}

        resp = path_client.get("/test")
        assert resp.json() == {
            "Page": 0,
            "Limit": 0,
            "Total": 1,
            "Data": [{"ID": 1, "String": "test", "Int": 10}],
        }

        resp = path_client.delete("/test/1")
        assert resp.status_code == 200

        resp = path_client.get("/test/1")
        assert resp.status_code == 404
        assert resp.content == b""


class TestPathStyleErrors:
    """Status code mapping and parameter parsing for path-style endpoints."""

    def test_bad_body_is_400(self, path_client):
        resp = path_client.post("/test", content="{broken")
        assert resp.status_code == 400

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_malformed_id_is_400(self, path_client, method):
        resp = getattr(path_client, method)("/test/abc")
        assert resp.status_code == 400

    def test_malformed_id_on_put_is_400(self, path_client):
        resp = path_client.put("/test/-1", content="{}")
        assert resp.status_code == 400

    @pytest.mark.parametrize("query", ["page=x", "limit=1.5", "page=-1", "limit=-3"])
    def test_malformed_pagination_is_400(self, path_client, query):
        resp = path_client.get(f"/test?{query}")
        assert resp.status_code == 400

    @pytest.mark.parametrize("raw_id", ["99999999999999999999999", "9223372036854775808", "9" * 5000])
    def test_out_of_range_id_is_400(self, path_client, raw_id):
        """Test that IDs beyond the signed 64-bit range are malformed."""
        assert path_client.get(f"/test/{raw_id}").status_code == 400
        assert path_client.put(f"/test/{raw_id}", content="{}").status_code == 400
        assert path_client.delete(f"/test/{raw_id}").status_code == 400

    def test_largest_id_is_accepted(self, path_client):
        assert path_client.get("/test/9223372036854775807").status_code == 404
        assert path_client.get("/test/0009223372036854775807").status_code == 404

    def test_out_of_range_limit_is_400(self, path_client):
        assert path_client.get("/test?limit=9223372036854775808").status_code == 400

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_missing_record_is_404(self, path_client, method):
        resp = getattr(path_client, method)("/test/9")
        assert resp.status_code == 404

    def test_update_missing_record_is_404(self, path_client):
        resp = path_client.put("/test/9", content='{"Int": 1}')
        assert resp.status_code == 404

    def test_pagination_query(self, path_client):
        """Test that page and limit are read from the query string."""
        for i in range(5):
            path_client.post("/test", content=f'{{"String": "s{i}", "Int": {i}}}')

        resp = path_client.get("/test?page=1&limit=2")
        body = resp.json()
        assert resp.status_code == 200
        assert body["Page"] == 1
        assert body["Limit"] == 2
        assert body["Total"] == 5
        assert [item["Int"] for item in body["Data"]] == [2, 3]


class TestEndpointSelection:
    """Only the requested endpoint types are mounted."""

    def test_read_only_endpoints(self, sample_rt):
        router = APIRouter()
        create_endpoints(sample_rt, EndpointTypes.READ | EndpointTypes.LIST, "/ro", router)
        app = FastAPI()
        app.include_router(router)
        client = TestClient(app)

        assert client.get("/ro").status_code == 200
        assert client.get("/ro/1").status_code == 404
        assert client.post("/ro", content="{}").status_code == 405
        assert client.delete("/ro/1").status_code == 405

    def test_query_style_without_list(self, sample_rt):
        router = Router()
        create_query_endpoints(sample_rt, EndpointTypes.CREATE | EndpointTypes.READ, "/q", router)
        client = TestClient(router)

        assert client.post("/q", content='{"Int": 1}').status_code == 200
        assert client.get("/q?id=1").status_code == 200
        assert client.get("/q").status_code == 405
        assert client.put("/q?id=1", content="{}").status_code == 405


class TestQueryStyleFlow:
    """End-to-end scenario through the query-style endpoints."""

    def test_basic_function(self, query_client):
        """Test create, list, read, update, read, delete, read."""
        assert query_client.post("/test", content='{"String": "test", "Int": 5}').status_code == 200

        resp = query_client.get("/test")
        assert resp.status_code == 200
        assert resp.json() == {
            "Page": 0,
            "Limit": 0,
            "Total": 1,
            "Data": [{"ID": 1, "String": "test", "Int": 5}],
        }

        resp = query_client.get("/test?id=1")
        assert resp.json() == {"ID": 1, "String": "test", "Int": 5}

        assert query_client.put("/test?id=1", content='{"Int": 10}').status_code == 200
        assert query_client.get("/test?id=1").json() == {"ID": 1, "String": "test", "Int": 10}

        assert query_client.delete("/test?id=1").status_code == 200
        assert query_client.get("/test?id=1").status_code == 404

    def test_put_without_id_is_400(self, query_client):
        assert query_client.put("/test", content="{}").status_code == 400

    def test_delete_with_bad_id_is_400(self, query_client):
        assert query_client.delete("/test?id=one").status_code == 400

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_out_of_range_id_is_400(self, query_client, method):
        resp = getattr(query_client, method)("/test?id=99999999999999999999999")
        assert resp.status_code == 400
