import pytest

from adverity_client import AdverityClient

API = "https://acme.example.com/api"


def build_client():
    return AdverityClient(instance_url="https://acme.example.com", token="t")


def test_query_connection_types_returns_first_page_results(requests_mock):
    client = build_client()
    matcher = requests_mock.get(
        f"{API}/connection-types/",
        json={
            "count": 2,
            "next": None,
            "previous": None,
            "results": [
                {"id": 1, "name": "Google Ads", "slug": "google-ads", "categories": ["ads"]},
                {"id": 2, "name": "Google Analytics 4", "slug": "ga4"},
            ],
        },
    )

    types = client.connection_types.query("google")

    assert [t.id for t in types] == [1, 2]
    assert types[0].categories == ["ads"]
    assert matcher.last_request.qs == {"search": ["google"]}


def test_query_ignores_next_link(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/target-types/",
        json={
            "count": 3,
            "next": f"{API}/target-types/?page=2&search=big",
            "results": [{"id": 1, "name": "BigQuery", "targets": "/api/target-types/1/targets/"}],
        },
    )

    types = client.destination_types.query("big")

    assert len(types) == 1
    assert types[0].destinations == "/api/target-types/1/targets/"
    assert requests_mock.call_count == 1


def test_query_all_follows_next_links(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/datastream-types/",
        [
            {
                "json": {
                    "count": 3,
                    "next": f"{API}/datastream-types/?page=2&search=ga",
                    "results": [{"id": 1}, {"id": 2}],
                }
            },
            {
                "json": {
                    "count": 3,
                    "next": None,
                    "previous": f"{API}/datastream-types/?search=ga",
                    "results": [{"id": 3, "connection_types": ["/api/connection-types/1/"]}],
                }
            },
        ],
    )

    types = client.datastream_types.query_all("ga")

    assert [t.id for t in types] == [1, 2, 3]
    assert types[2].connection_types == ["/api/connection-types/1/"]
    assert requests_mock.request_history[1].qs == {"page": ["2"], "search": ["ga"]}


def test_query_all_stops_on_repeated_next_link(requests_mock):
    client = build_client()
    loop = f"{API}/connection-types/?page=2&search=x"
    requests_mock.get(
        f"{API}/connection-types/",
        json={"count": 1, "next": loop, "results": [{"id": 1}]},
    )

    types = client.authorization_types.query_all("x")

    assert [t.id for t in types] == [1, 1]
    assert requests_mock.call_count == 2


def test_authorization_types_share_connection_catalog(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/connection-types/",
        json={"count": 1, "results": [{"id": 5, "connections": "/api/connection-types/5/connections/"}]},
    )

    types = client.authorization_types.query("fb")

    assert types[0].authorizations == "/api/connection-types/5/connections/"


def test_empty_catalog_body_yields_no_results(requests_mock):
    client = build_client()
    requests_mock.get(f"{API}/connection-types/", status_code=204)

    assert client.connection_types.query("none") == []


@pytest.mark.parametrize("status", [401, 500])
def test_catalog_errors_propagate(requests_mock, status):
    from adverity_client.exceptions import RequestError

    client = build_client()
    requests_mock.get(f"{API}/connection-types/", status_code=status, text="denied")

    with pytest.raises(RequestError):
        client.connection_types.query("x")


def test_query_all_resolves_root_relative_next_links(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/connection-types/",
        [
            {"json": {"count": 2, "next": "/api/connection-types/?page=2&search=g", "results": [{"id": 1}]}},
            {"json": {"count": 2, "next": None, "results": [{"id": 2}]}},
        ],
    )

    types = client.connection_types.query_all("g")

    assert [t.id for t in types] == [1, 2]
    assert requests_mock.request_history[1].url == f"{API}/connection-types/?page=2&search=g"


def test_query_all_resolves_query_only_next_links(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/target-types/",
        [
            {"json": {"count": 2, "next": "?page=2", "results": [{"id": 1}]}},
            {"json": {"count": 2, "results": [{"id": 2}]}},
        ],
    )

    types = client.destination_types.query_all("")

    assert [t.id for t in types] == [1, 2]
    assert requests_mock.request_history[1].qs == {"page": ["2"]}
