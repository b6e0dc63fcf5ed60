"""
flatproj CLI.

Usage:
    python -m flatproj.cli distance LON1 LAT1 LON2 LAT2 [--compare]
    python -m flatproj.cli project LON LAT [--ref-lat LAT0] [--ref-lon LON0]
    python -m flatproj.cli unproject X Y (--ref-lat LAT0 | --region FILE)
    python -m flatproj.cli destination LON LAT DIST_KM BEARING_DEG
    python -m flatproj.cli bench [-n N]

Every command accepts --region FILE (see flatproj.config); --ref-lat and
--ref-lon override the region's values. Without either, the reference
latitude is the mean latitude of the given points.
"""

import argparse
import sys
import time

from .config import load_region_config, projector_from_config
from .errors import ConfigError, FlatprojError
from .log import get_logger
from .projection import Projector
from .point import PlanarPoint
from .reference import geodesic_bearing, geodesic_distance_km, haversine_distance_km

logger = get_logger("flatproj.cli")

# beyond this the flat approximation is no longer within ~0.1%
MAX_ACCURATE_DISTANCE_KM = 500.0

AACHEN = (6.186389, 50.823194)
MEIERSBERG = (6.953333, 51.301389)


def resolve_projector(args, points: list[tuple[float, float]]) -> Projector:
    """
    Pick the projector from --region or the points' mean latitude.
    --ref-lat/--ref-lon override either.
    """
    lat0, lon0 = None, 0.0
    if args.region:
        base = projector_from_config(load_region_config(args.region))
        lat0, lon0 = base.reference_latitude, base.reference_longitude
    elif points:
        lat0 = sum(p[1] for p in points) / len(points)

    if args.ref_lat is not None:
        lat0 = args.ref_lat
    if args.ref_lon is not None:
        lon0 = args.ref_lon
    if lat0 is None:
        raise ConfigError("a reference latitude is required (--ref-lat or --region)")

    logger.debug("Using reference lat=%.6f lon=%.6f", lat0, lon0)
    return Projector(lat0, lon0)


def cmd_distance(args):
    a = (args.lon1, args.lat1)
    b = (args.lon2, args.lat2)
    proj = resolve_projector(args, [a, b])
    p1 = proj.project(*a)
    p2 = proj.project(*b)
    dist, brg = p1.distance_bearing(p2)

    if dist > MAX_ACCURATE_DISTANCE_KM:
        logger.warning("Distance %.1f km exceeds %.0f km; flat approximation is inaccurate",
                       dist, MAX_ACCURATE_DISTANCE_KM)

    print(f"distance_km: {dist:.6f}")
    print(f"bearing_deg: {brg:.6f}")

    if args.compare:
        geo = geodesic_distance_km(a, b, proj.ellipsoid)
        hav = haversine_distance_km(a, b)
        print(f"geodesic_km: {geo:.6f}")
        print(f"geodesic_bearing_deg: {geodesic_bearing(a, b, proj.ellipsoid):.6f}")
        print(f"haversine_km: {hav:.6f}")
        if geo > 0:
            print(f"relative_error: {abs(dist - geo) / geo:.6%}")


def cmd_project(args):
    proj = resolve_projector(args, [(args.lon, args.lat)])
    p = proj.project(args.lon, args.lat)
    print(f"reference_latitude: {proj.reference_latitude:.6f}")
    print(f"reference_longitude: {proj.reference_longitude:.6f}")
    print(f"x_km: {p.x:.6f}")
    print(f"y_km: {p.y:.6f}")


def cmd_unproject(args):
    proj = resolve_projector(args, [])
    lon, lat = PlanarPoint(args.x, args.y).to_lonlat(proj)
    print(f"lon: {lon:.8f}")
    print(f"lat: {lat:.8f}")


def cmd_destination(args):
    proj = resolve_projector(args, [(args.lon, args.lat)])
    start = proj.project(args.lon, args.lat)
    lon, lat = start.destination(args.distance, args.bearing).to_lonlat(proj)
    print(f"lon: {lon:.8f}")
    print(f"lat: {lat:.8f}")


def _time_calls(fn, n: int) -> float:
    """Return mean seconds per call."""
    t0 = time.perf_counter()
    for _ in range(n):
        fn()
    return (time.perf_counter() - t0) / n


def cmd_bench(args):
    n = args.n
    if n <= 0:
        raise ConfigError("-n must be positive")

    def flat():
        proj = Projector((AACHEN[1] + MEIERSBERG[1]) / 2.0)
        return proj.project(*AACHEN).distance(proj.project(*MEIERSBERG))

    results = {
        "flat": _time_calls(flat, n),
        "haversine": _time_calls(lambda: haversine_distance_km(AACHEN, MEIERSBERG), n),
        "geodesic": _time_calls(lambda: geodesic_distance_km(AACHEN, MEIERSBERG), n),
    }

    print(f"\n=== Benchmark ({n} calls) ===")
    for name, secs in results.items():
        print(f"  {name:<10} {secs * 1e6:10.3f} us/call")


def _add_reference_args(p):
    p.add_argument("--ref-lat", type=float, default=None,
                   help="Reference latitude in degrees (default: mean of the points)")
    p.add_argument("--ref-lon", type=float, default=None,
                   help="Reference longitude in degrees (default: region's, else 0)")
    p.add_argument("--region", default=None,
                   help="Region JSON file with extents or reference_latitude")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatproj",
        description="Fast flat-projection distance and bearing",
    )
    sub = parser.add_subparsers(dest="command")

    dist_p = sub.add_parser("distance", help="Distance and bearing between two points")
    for name in ("lon1", "lat1", "lon2", "lat2"):
        dist_p.add_argument(name, type=float)
    dist_p.add_argument("--compare", action="store_true",
                        help="Also print geodesic and haversine reference values")
    _add_reference_args(dist_p)
    dist_p.set_defaults(func=cmd_distance)

    proj_p = sub.add_parser("project", help="Project lon/lat to planar km")
    proj_p.add_argument("lon", type=float)
    proj_p.add_argument("lat", type=float)
    _add_reference_args(proj_p)
    proj_p.set_defaults(func=cmd_project)

    unproj_p = sub.add_parser("unproject", help="Planar km back to lon/lat")
    unproj_p.add_argument("x", type=float)
    unproj_p.add_argument("y", type=float)
    _add_reference_args(unproj_p)
    unproj_p.set_defaults(func=cmd_unproject)

    dest_p = sub.add_parser("destination", help="Point at distance/bearing from a start")
    dest_p.add_argument("lon", type=float)
    dest_p.add_argument("lat", type=float)
    dest_p.add_argument("distance", type=float, help="Distance in km")
    dest_p.add_argument("bearing", type=float, help="Degrees clockwise from north")
    _add_reference_args(dest_p)
    dest_p.set_defaults(func=cmd_destination)

    bench_p = sub.add_parser("bench", help="Time flat vs haversine vs geodesic")
    bench_p.add_argument("-n", type=int, default=100_000, help="Calls per method")
    bench_p.set_defaults(func=cmd_bench)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except FlatprojError as e:
        logger.error("%s", e, extra={"command": args.command})
        sys.exit(1)


if __name__ == "__main__":
    main()
