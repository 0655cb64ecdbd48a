import pytest

from judgesolvers.routing import RoadMap, run

HEADER = "From                 To                   Route      Miles"
DASHES = "-------------------- -------------------- ---------- -----"


def test_single_road_route():
    road_map = RoadMap()
    road_map.add_route("Alpha,Beta,R1,10")
    assert road_map.route("Alpha", "Beta") == [("Alpha", "Beta", "R1", 10)]


def test_route_works_both_ways():
    road_map = RoadMap()
    road_map.add_route("Alpha,Beta,R1,10")
    assert road_map.route("Beta", "Alpha") == [("Beta", "Alpha", "R1", 10)]


def test_duplicate_road_keeps_shorter_and_first_on_tie():
    road_map = RoadMap()
    road_map.add_route("Alpha,Beta,R1,10")
    road_map.add_route("Beta,Alpha,R2,5")
    road_map.add_route("Alpha,Beta,R3,5")
    assert road_map.route("Alpha", "Beta") == [("Alpha", "Beta", "R2", 5)]


def test_route_takes_cheaper_detour():
    road_map = RoadMap()
    road_map.add_route("A,B,X,1")
    road_map.add_route("B,C,Y,1")
    road_map.add_route("A,C,Z,5")
    legs = road_map.route("A", "C")
    assert [leg[2] for leg in legs] == ["X", "Y"]
    assert legs[0][0] == "A" and legs[-1][1] == "C"


def test_unknown_city_has_no_route():
    road_map = RoadMap()
    road_map.add_route("A,B,X,1")
    assert road_map.route("A", "Nowhere") == []


def test_malformed_route_line():
    with pytest.raises(ValueError):
        RoadMap().add_route("A,B,X")


def test_report_layout():
    road_map = RoadMap()
    road_map.add_route("Alpha,Beta,R1,10")
    text = road_map.report("Alpha,Beta")
    assert text.startswith("\n\n")
    lines = text[2:].rstrip("\n").split("\n")
    assert lines[0] == HEADER
    assert lines[1] == DASHES
    assert lines[2].split() == ["Alpha", "Beta", "R1", "10"]
    assert lines[-1].split() == ["Total", "10"]
    assert len(lines[-1]) == len(HEADER)
    assert len(lines[2]) == len(HEADER)


def test_run_processes_requests_after_blank_line():
    text = "Alpha,Beta,R1,10\nBeta,Gamma,R2,20\n\nAlpha,Gamma\nGamma,Alpha\n"
    output = run(text)
    assert output.count(HEADER) == 2
    assert "R1" in output and "R2" in output
    assert output.startswith("\n\n" + HEADER)