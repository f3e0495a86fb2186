import argparse
import base64
import json
import logging
import sys
from typing import List, Optional

from solders.pubkey import Pubkey

from .errors import CodecError
from .pipeline import decode_record, encode_instruction
from .schema import InstructionRecord
from .upgrade import build_upgrade_instruction

logger = logging.getLogger(__name__)


def _pubkey(value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid pubkey: {value}") from exc


def record_to_json(record: InstructionRecord) -> dict:
    return {
        "program_id": str(Pubkey(record.processor_id)),
        "accounts": [
            {
                "pubkey": str(Pubkey(acc.address)),
                "is_signer": acc.is_signer,
                "is_writable": acc.is_writable,
            }
            for acc in record.accounts
        ],
        "data": base64.b64encode(record.payload).decode("ascii"),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="instruction-codec",
        description="Encode instructions as unpadded base64 for governance proposals.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    up = sub.add_parser("upgrade", help="encode a program upgrade instruction")
    up.add_argument("--program", type=_pubkey, required=True)
    up.add_argument("--buffer", type=_pubkey, required=True)
    up.add_argument("--authority", type=_pubkey, required=True)
    up.add_argument("--spill", type=_pubkey, default=None, help="defaults to --authority")

    dec = sub.add_parser("decode", help="decode an encoded instruction")
    dec.add_argument("text")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "upgrade":
            ix = build_upgrade_instruction(args.program, args.buffer, args.authority, args.spill)
            print(f"Encoded ix: {encode_instruction(ix)}")
        else:
            print(json.dumps(record_to_json(decode_record(args.text)), indent=2))
    except CodecError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
