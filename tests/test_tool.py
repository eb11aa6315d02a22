# coding: utf-8

import pytest

import vrfglass.directory
import vrfglass.tool


@pytest.fixture
def use_directory(monkeypatch, directory):
    monkeypatch.setattr(vrfglass.tool, "load_directory",
                        lambda config: directory)


def test_routers(use_directory, capsys):
    vrfglass.tool.main(["routers"])
    assert capsys.readouterr().out.splitlines() == [
        "10.0.0.1:179\tedge1",
        "10.0.0.3:179\tedge1",
        "10.0.0.2:179\tedge2",
    ]


def test_routing_instances(use_directory, capsys):
    vrfglass.tool.main(["routing-instances"])
    assert capsys.readouterr().out.splitlines() == [
        "65000:1\ttype0\tcustomer-a",
        "65000:2\ttype0\t65000:2",
    ]


def test_query(use_directory, capsys):
    vrfglass.tool.main(["query", "--router", "edge1", "--rd", "192.1.2.5:100"])
    assert capsys.readouterr().out.strip() == \
        "#/?Router=edge1&route_distinguisher=192.1.2.5:100"


def test_query_single_instance(monkeypatch, single_instance_directory, capsys):
    monkeypatch.setattr(vrfglass.tool, "load_directory",
                        lambda config: single_instance_directory)
    vrfglass.tool.main(["query", "--mode", "OrLonger", "--rd", "65000:1",
                        "8.8.8.0/24"])
    captured = capsys.readouterr()
    assert captured.out.strip() == "#/OrLonger/8.8.8.0/24"
    assert "ignoring 65000:1" in captured.err


def test_parse(capsys):
    vrfglass.tool.main(["parse", "#/Exact/10.0.0.0/8?Router=edge1"])
    assert capsys.readouterr().out.splitlines() == [
        "mode\tExact",
        "value\t10.0.0.0/8",
        "value-type\tip-lookup",
        "router\tedge1",
        "route-distinguisher\tdefault",
    ]


def test_parse_unknown_mode(capsys):
    with pytest.raises(SystemExit) as excinfo:
        vrfglass.tool.main(["parse", "#/Bogus/10.0.0.1"])
    assert excinfo.value.code == 1


def test_initialization_failure(monkeypatch, capsys):
    def fail(config):
        raise vrfglass.directory.InitializationFailure("GET /api/routers failed")

    monkeypatch.setattr(vrfglass.tool, "load_directory", fail)
    with pytest.raises(SystemExit) as excinfo:
        vrfglass.tool.main(["routers"])
    assert excinfo.value.code == 1
    assert "GET /api/routers failed" in capsys.readouterr().err
