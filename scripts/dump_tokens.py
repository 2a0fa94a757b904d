#!/usr/bin/env python
import sys
from pathlib import Path

from doctagpy.lexer import dump_tokens, normalize_comment
from doctagpy.parser import DocCommentParser, DuplicateTagError


def main() -> None:
    if len(sys.argv) > 1:
        text = Path(sys.argv[1]).expanduser().read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    tokens = normalize_comment(text)
    dump_tokens(tokens)

    parser = DocCommentParser(text)
    try:
        parser.parse()
    except DuplicateTagError as exc:
        print(f"\nERROR line {exc.line}: {exc}")
        return

    print("\nElements:")
    for element in parser.elements:
        print(f"- {element.tag:<12} line={element.line:<3} content={element.content!r}")


if __name__ == "__main__":
    main()
