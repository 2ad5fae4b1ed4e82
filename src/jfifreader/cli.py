from __future__ import annotations
import argparse, json, logging, sys
from .binary.errors import DecodeError
from .models.file import JfifFile

logger = logging.getLogger("jfifreader")

def _load(args) -> JfifFile:
    return JfifFile.from_binary(args.input)

def cmd_info(args):
    f = _load(args)
    if args.summary:
        print(f"segments={len(f.segments)} conforming={f.is_conforming}")
        return 0

    if f.is_conforming:
        unit = f.density.unit_name or f"unknown({f.density_units})"
        print(f"JFIF {f.version}")
        print(f"density: {f.density_x}x{f.density_y} ({unit})")
        print(f"thumbnail: {f.thumbnail_x}x{f.thumbnail_y}")
    else:
        print("not a conforming JFIF stream")

    for seg in f.segments:
        line = f"[{seg.sequence_index:3d}] {seg.id_string:<7} @{seg.byte_offset:<8d} {seg.description or '-'}"
        if args.payload:
            line += f"  ({seg.size} bytes)"
        print(line)
    return 0

def cmd_segments(args):
    f = _load(args)
    for id_string, description, offset in f.rows():
        print(f"{id_string}\t{description or ''}\t{offset}")
    return 0

def cmd_to_json(args):
    f = _load(args)
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(f.model_dump(mode="json"), out, indent=2)
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="jfifreader", description="JPEG/JFIF marker segment utilities")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging verbosity (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print JFIF header fields and the segment list")
    sp.add_argument("input", help="Path to a .jpg/.jpeg file")
    sp.add_argument("--summary", action="store_true", help="Print one line: segment count and conformance")
    sp.add_argument("--payload", action="store_true", help="Show payload sizes")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("segments", help="print (id, description, offset) rows, tab separated")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_segments)

    sp = sub.add_parser("to-json", help="dump the parsed model as JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, ns.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        return ns.func(ns)
    except DecodeError as e:
        logger.error("%s: %s (%s)", ns.input, e, e.kind.value)
        return 1
    except OSError as e:
        logger.error("cannot read %s: %s", ns.input, e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
