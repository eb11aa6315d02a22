# coding: utf-8

import pytest

from vrfglass.directory import InstanceDirectory, RoutingInstanceEntry, Router
from vrfglass.search import SearchForm, deduplicated_routing_instances, \
    instance_options, router_options


def test_deduplication(directory):
    assert deduplicated_routing_instances(directory) == [
        ("65000:1", "customer-a"),
        ("65000:2", None),
    ]


def test_same_rd_different_names_are_kept():
    directory = InstanceDirectory.from_json({}, {
        "a": [["65000:1", "customer-a"], ["65000:1", None]],
        "b": [["65000:1", "cust-a"], ["65000:1", "customer-a"]],
    })
    entries = deduplicated_routing_instances(directory)
    assert len(entries) == 3
    assert set(entries) == {("65000:1", "customer-a"), ("65000:1", None),
                            ("65000:1", "cust-a")}
    assert len(set(entries)) == len(entries)


def test_deduplication_order_is_stable():
    groups = {
        "b": [["65000:2", None], ["192.1.2.5:100", "blue"]],
        "a": [["65000:1", "red"], ["65000:2", None]],
    }
    reordered = dict(reversed(list(groups.items())))
    first = deduplicated_routing_instances(InstanceDirectory.from_json({}, groups))
    second = deduplicated_routing_instances(InstanceDirectory.from_json({}, reordered))
    assert first == second
    assert [entry.route_distinguisher for entry in first] == \
        ["192.1.2.5:100", "65000:1", "65000:2"]


def test_router_names_collapse():
    routers = [Router("r1", "edge1"), Router("r2", "edge1")]
    assert router_options(routers) == [("all", "on all"), ("edge1", "on edge1")]


def test_router_options_follow_directory_order(directory):
    assert [value for value, _ in router_options(directory.routers)] == \
        ["all", "edge1", "edge2"]


def test_instance_labels():
    entries = [RoutingInstanceEntry("65000:1", "customer-a"),
               RoutingInstanceEntry("65000:2", None)]
    assert instance_options(entries) == [("65000:1", "customer-a"),
                                         ("65000:2", "65000:2")]


def test_single_instance_is_not_offered(single_instance_directory):
    form = SearchForm(single_instance_directory)
    assert not form.offers_instances
    assert form.instances == []
    assert instance_options([]) == []


def test_single_instance_query_never_filters(single_instance_directory):
    form = SearchForm(single_instance_directory)
    location = form.submit({"query-mode": "Exact", "input-field": "10.0.0.1",
                            "router-sel": "all", "table-sel": "0:0"})
    assert location == "#/Exact/10.0.0.1"
    assert "route_distinguisher" not in location


def test_form_offers_default_instance(directory):
    form = SearchForm(directory)
    assert form.offers_instances
    assert form.instances[0] == ("default", "default instance")
    assert form.instances[1:] == [("65000:1", "customer-a"),
                                  ("65000:2", "65000:2")]


def test_preselection_defaults(directory):
    form = SearchForm(directory)
    assert form.selected_mode == "MostSpecific"
    assert form.selected_value == ""
    assert form.selected_router == "all"
    assert form.selected_instance == "default"


def test_preselection_from_query(directory):
    form = SearchForm(directory, "#/Exact/10.0.0.0/8?Router=edge2&route_distinguisher=65000:2")
    assert form.selected_mode == "Exact"
    assert form.selected_value == "10.0.0.0/8"
    assert form.selected_router == "edge2"
    assert form.selected_instance == "65000:2"


def test_submit_scenarios(directory, single_instance_directory):
    form = SearchForm(single_instance_directory)
    assert form.submit({"query-mode": "OrLonger", "input-field": "8.8.8.0/24",
                        "router-sel": "all"}) == "#/OrLonger/8.8.8.0/24"

    directory = InstanceDirectory.from_json(
        {"r1": {"client_name": "edge1"}},
        {"a": [["192.1.2.5:100", None], ["65000:1", None]]})
    form = SearchForm(directory)
    assert form.submit({"query-mode": "MostSpecific", "input-field": "",
                        "router-sel": "edge1", "table-sel": "192.1.2.5:100"}) == \
        "#/?Router=edge1&route_distinguisher=192.1.2.5:100"


@pytest.mark.parametrize("string", [
    "#/",
    "#/OrLonger/8.8.8.0/24",
    "#/Exact/10.0.0.1?Router=edge1",
    "#/?Router=edge1&route_distinguisher=65000:1",
    "#/Contains/example.com?route_distinguisher=65000:2",
])
def test_resubmission_round_trip(directory, string):
    form = SearchForm(directory, string)
    assert form.submit(form.prefilled()) == string
