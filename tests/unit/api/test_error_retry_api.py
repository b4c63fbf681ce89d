"""Tests for the error retry API: status codes and response bodies."""

import pytest
from httpx import AsyncClient

from digit_services.application.exceptions import IndexStoreError, ReplayError
from digit_services.domain import error_codes


def _record(status: str = "PENDING", retry_count: int = 0) -> dict:
    return {
        "id": "E1",
        "status": status,
        "retryCount": retry_count,
        "apiDetails": {"url": "http://pgr/_create", "requestBody": "{}"},
    }


@pytest.mark.asyncio
async def test_retry_eligible_record_returns_202(
    async_client: AsyncClient, index_store, mock_publisher, request_info
):
    index_store.fetch.return_value = {"data": [_record()]}

    r = await async_client.post("/error/v1/_retry", json={"RequestInfo": request_info, "id": "E1"})

    assert r.status_code == 202
    data = r.json()
    assert data["id"] == "E1"
    assert data["message"] == error_codes.ERROR_RETRY_ATTEMPT_SUCCESSFUL_MSG
    assert data["ResponseInfo"]["msgId"] == "msg-1"
    assert data["ResponseInfo"]["status"] == "successful"
    mock_publisher.push.assert_awaited_once()


@pytest.mark.asyncio
async def test_retry_failed_replay_still_returns_202(
    async_client: AsyncClient, index_store, replay_client, mock_publisher
):
    index_store.fetch.return_value = {"data": [_record(retry_count=2)]}
    replay_client.replay.side_effect = ReplayError("HTTP 500")

    r = await async_client.post("/error/v1/_retry", json={"id": "E1"})

    assert r.status_code == 202
    published = mock_publisher.push.await_args.args[1][0]
    assert published["status"] == "FAILED"
    assert published["retryCount"] == 3


@pytest.mark.asyncio
async def test_retry_ineligible_record_returns_500_with_violations(
    async_client: AsyncClient, index_store, mock_publisher
):
    index_store.fetch.return_value = {"data": [_record(status="SUCCESS")]}

    r = await async_client.post("/error/v1/_retry", json={"id": "E1"})

    assert r.status_code == 500
    data = r.json()
    assert data["message"] == error_codes.ERROR_RETRY_ATTEMPT_FAILURE_MSG
    assert error_codes.ERROR_ALREADY_RESOLVED_CODE in data["responseMap"]
    mock_publisher.push.assert_not_awaited()


@pytest.mark.asyncio
async def test_retry_unknown_id_returns_404(async_client: AsyncClient, index_store):
    index_store.fetch.return_value = {"data": []}

    r = await async_client.post("/error/v1/_retry", json={"id": "nope"})

    assert r.status_code == 404
    assert r.json()["Errors"][0]["code"] == "ERROR_RECORD_NOT_FOUND"


@pytest.mark.asyncio
async def test_retry_index_unreachable_returns_502(async_client: AsyncClient, index_store):
    index_store.fetch.side_effect = IndexStoreError("connection refused")

    r = await async_client.post("/error/v1/_retry", json={"id": "E1"})

    assert r.status_code == 502


@pytest.mark.asyncio
async def test_retry_publish_failure_returns_503(
    async_client: AsyncClient, index_store, mock_publisher
):
    index_store.fetch.return_value = {"data": [_record()]}
    mock_publisher.push.side_effect = RuntimeError("broker down")

    r = await async_client.post("/error/v1/_retry", json={"id": "E1"})

    assert r.status_code == 503


@pytest.mark.asyncio
async def test_retry_missing_id_returns_422(async_client: AsyncClient):
    r = await async_client.post("/error/v1/_retry", json={})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_search_empty_criteria_returns_empty_list(async_client: AsyncClient, index_store):
    r = await async_client.post("/error/v1/_search", json={"ErrorDetailSearchCriteria": {}})

    assert r.status_code == 200
    assert r.json()["ErrorDetails"] == []
    index_store.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_search_by_id_returns_records(async_client: AsyncClient, index_store):
    index_store.fetch.return_value = {"data": [_record()]}

    r = await async_client.post(
        "/error/v1/_search", json={"ErrorDetailSearchCriteria": {"id": ["E1"]}}
    )

    assert r.status_code == 200
    details = r.json()["ErrorDetails"]
    assert [d["id"] for d in details] == ["E1"]
    assert details[0]["retryCount"] == 0
