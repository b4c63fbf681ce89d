# digit_services/infrastructure/search/query_builder.py

from typing import Any, Dict, List

from digit_services.domain.schemas.error_retry import ErrorDetailSearchCriteria

ID_FIELD = "Data.id.keyword"
ERROR_DETAIL_UUID_FIELD = "Data.uuid.keyword"
TENANT_FIELD = "Data.tenantId.keyword"


class ErrorIndexQueryBuilder:
    """Builds bool/filter queries against the error detail index."""

    def __init__(self, search_uri: str, default_limit: int = 10, max_limit: int = 100):
        self.search_uri = search_uri
        self._default_limit = default_limit
        self._max_limit = max_limit

    def prepare_request_for_id(self, error_id: str) -> Dict[str, Any]:
        return {
            "from": 0,
            "size": 1,
            "query": {"bool": {"filter": [{"term": {ID_FIELD: error_id}}]}},
        }

    def prepare_request_for_search(self, criteria: ErrorDetailSearchCriteria) -> Dict[str, Any]:
        filters: List[Dict[str, Any]] = []
        if criteria.id:
            filters.append({"terms": {ID_FIELD: criteria.id}})
        if criteria.error_detail_uuid:
            filters.append({"terms": {ERROR_DETAIL_UUID_FIELD: criteria.error_detail_uuid}})
        if criteria.tenant_id:
            filters.append({"term": {TENANT_FIELD: criteria.tenant_id}})

        limit = min(criteria.limit or self._default_limit, self._max_limit)
        return {
            "from": criteria.offset or 0,
            "size": limit,
            "query": {"bool": {"filter": filters}},
        }
