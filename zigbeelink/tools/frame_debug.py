import argparse
import json
import sys
from typing import Optional, Sequence

from zigbeelink.core.errors import DecodeError
from zigbeelink.parsing.frames import decode_attribute_response
from zigbeelink.parsing.messages import decode_message


def parse_hex(text: str) -> bytes:
    cleaned = "".join(text.replace(":", " ").split())
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Decode one coordinator payload and print it as JSON.")
    parser.add_argument("payload", type=str, help="Payload bytes as hex, e.g. '00 34 12 01 06 00 0a ...'.")
    parser.add_argument(
        "--message-type",
        type=lambda value: int(value, 0),
        default=None,
        help="Coordinator message type (e.g. 0x1015). Without it the payload is decoded as an attribute response.",
    )
    args = parser.parse_args(argv)

    try:
        data = parse_hex(args.payload)
    except ValueError as exc:
        print(f"invalid hex payload: {exc}", file=sys.stderr)
        return 2

    try:
        if args.message_type is None:
            result = decode_attribute_response(data)
        else:
            result = decode_message(args.message_type, data)
    except DecodeError as exc:
        print(f"decode failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
