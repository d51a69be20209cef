import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from tokenizer_pipeline.config import ManagerConfig
from tokenizer_pipeline.manager import TokenizerManager
from tokenizer_pipeline.tokenizer import BoxedTokenizer

logger = logging.getLogger(__name__)


def tokenize_to_dict(tokenizer: BoxedTokenizer, analyzer: str, source: str, text: bytes) -> Dict:
    return {
        "analyzer": analyzer,
        "source": source,
        "tokens": [
            {
                "text": token.text,
                "position": token.position,
                "offset_from": token.offset_from,
                "offset_to": token.offset_to,
            }
            for token in tokenizer.tokenize(text)
        ],
    }


def build_manager(config_path: Optional[str]) -> TokenizerManager:
    if not config_path:
        return TokenizerManager.default()
    config_data = json.loads(Path(config_path).read_text(encoding="utf-8"))
    return TokenizerManager.from_config(ManagerConfig.from_dict(config_data))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Tokenize text with a named analyzer.")
    parser.add_argument(
        "--analyzer",
        type=str,
        default="default",
        help="Registered analyzer name (default: %(default)s).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        type=str,
        nargs="+",
        help="Text snippets to tokenize.",
    )
    source.add_argument(
        "--input",
        type=str,
        nargs="+",
        help="Input file paths.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Optional analyzer config JSON file.",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Optional JSONL output path.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List registered analyzers and exit.",
    )
    parser.add_argument(
        "--log",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log)

    manager = build_manager(args.config)
    if args.list:
        for name in manager.names():
            print(name)
        return 0

    if not args.text and not args.input:
        parser.error("one of --text or --input is required")

    tokenizer = manager.get(args.analyzer)
    if tokenizer is None:
        print(
            f"Unknown analyzer '{args.analyzer}'. Available: {', '.join(manager.names())}",
            file=sys.stderr,
        )
        return 2

    if args.text:
        # Undecodable argv bytes arrive as surrogate escapes; fsencode restores them.
        inputs = [(f"text:{i}", os.fsencode(t)) for i, t in enumerate(args.text)]
    else:
        inputs = [(path, Path(path).read_bytes()) for path in args.input]

    writer = None
    if args.output:
        writer = Path(args.output).open("w", encoding="utf-8")

    try:
        for name, data in inputs:
            logger.info("Tokenizing %s with '%s'", name, args.analyzer)
            result = tokenize_to_dict(tokenizer, args.analyzer, name, data)
            line = json.dumps(result, ensure_ascii=False)
            if writer:
                writer.write(line + "\n")
            else:
                print(line)
    finally:
        if writer:
            writer.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
