import json

import pytest

from flatproj import cli


def _run(capsys, *argv):
    cli.main(list(argv))
    return capsys.readouterr().out


def _values(out):
    vals = {}
    for line in out.splitlines():
        if ":" in line:
            key, _, val = line.partition(":")
            vals[key.strip()] = val.strip()
    return vals


def test_distance(capsys):
    out = _run(capsys, "distance", "6.186389", "50.823194", "6.953333", "51.301389",
               "--ref-lat", "51.05")
    vals = _values(out)
    assert float(vals["distance_km"]) == pytest.approx(75.648, rel=1e-3)
    assert 45.0 < float(vals["bearing_deg"]) < 45.6


def test_distance_compare(capsys):
    out = _run(capsys, "distance", "6.186389", "50.823194", "6.953333", "51.301389", "--compare")
    vals = _values(out)
    assert float(vals["geodesic_km"]) == pytest.approx(75.6356, abs=1e-3)
    assert "relative_error" in vals


def test_project_and_unproject(capsys):
    vals = _values(_run(capsys, "project", "-122.42", "37.77", "--ref-lat", "37.5"))
    x, y = vals["x_km"], vals["y_km"]
    vals = _values(_run(capsys, "unproject", x, y, "--ref-lat", "37.5"))
    assert float(vals["lon"]) == pytest.approx(-122.42, abs=1e-5)
    assert float(vals["lat"]) == pytest.approx(37.77, abs=1e-5)


def test_destination(capsys):
    vals = _values(_run(capsys, "destination", "30.5", "50.5", "1", "45",
                        "--ref-lat", "50", "--ref-lon", "30"))
    assert float(vals["lon"]) == pytest.approx(30.5098622, abs=1e-5)
    assert float(vals["lat"]) == pytest.approx(50.5063572, abs=1e-5)


def test_region_file(tmp_path, capsys):
    region = tmp_path / "region.json"
    region.write_text(json.dumps({"south": 50.8, "west": 6.1, "north": 51.3, "east": 7.1}))
    vals = _values(_run(capsys, "project", "6.5", "51.05", "--region", str(region)))
    assert float(vals["y_km"]) == pytest.approx(0.0, abs=1e-9)


def test_unproject_without_reference_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["unproject", "1.0", "2.0"])
    assert exc.value.code == 1


def test_missing_region_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["project", "1.0", "2.0", "--region", str(tmp_path / "missing.json")])
    assert exc.value.code == 1


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 1


def test_bench(capsys):
    out = _run(capsys, "bench", "-n", "10")
    assert "flat" in out
    assert "haversine" in out
    assert "geodesic" in out


def test_ref_flags_override_region_file(tmp_path, capsys):
    region = tmp_path / "region.json"
    region.write_text(json.dumps({"reference_latitude": 10.0, "reference_longitude": 5.0}))
    vals = _values(_run(capsys, "project", "6.0", "40.0", "--region", str(region),
                        "--ref-lat", "40.0", "--ref-lon", "6.0"))
    assert float(vals["reference_latitude"]) == 40.0
    assert float(vals["reference_longitude"]) == 6.0
    assert float(vals["x_km"]) == 0.0
    assert float(vals["y_km"]) == 0.0


def test_ref_lat_keeps_region_longitude(tmp_path, capsys):
    region = tmp_path / "region.json"
    region.write_text(json.dumps({"reference_latitude": 10.0, "reference_longitude": 5.0}))
    vals = _values(_run(capsys, "project", "6.0", "40.0", "--region", str(region),
                        "--ref-lat", "40.0"))
    assert float(vals["reference_latitude"]) == 40.0
    assert float(vals["reference_longitude"]) == 5.0


def test_undecodable_region_file_exits(tmp_path):
    region = tmp_path / "region.json"
    region.write_bytes(b'{"reference_latitude": "\xff\xfe"}')
    with pytest.raises(SystemExit) as exc:
        cli.main(["project", "1.0", "2.0", "--region", str(region)])
    assert exc.value.code == 1
