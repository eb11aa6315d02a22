# coding: utf-8

import pytest

import vrfglass.directory

ROUTERS = {
    "10.0.0.2:179": {"client_name": "edge2", "router_id": "10.0.0.2"},
    "10.0.0.1:179": {"client_name": "edge1", "router_id": "10.0.0.1"},
    "10.0.0.3:179": {"client_name": "edge1", "router_id": "10.0.0.1"},
}

ROUTING_INSTANCES = {
    "groupA": [["65000:1", "customer-a"]],
    "groupB": [["65000:1", "customer-a"], ["65000:2", None]],
}


@pytest.fixture
def directory():
    return vrfglass.directory.InstanceDirectory.from_json(ROUTERS,
                                                          ROUTING_INSTANCES)


@pytest.fixture
def single_instance_directory():
    return vrfglass.directory.InstanceDirectory.from_json(
        ROUTERS, {"groupA": [["0:0", None]], "groupB": [["0:0", None]]})
