"""CLI: turn each input text into a blackout found poem."""

from __future__ import annotations

import argparse
import json
import logging
import random

from poemify.lexicon.engine import LEXICON_BACKENDS, build_lexicon
from poemify.parse.spacy_tagger import SpacyTagger
from poemify.pipeline import poemify_text
from poemify.render.blackout import render_html, render_text
from poemify.runtime.logging_setup import setup_logging
from poemify.runtime.settings import load_settings_from_env

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Black out prose down to one grammatical clause")
    parser.add_argument("--input", required=True, help="Input JSONL with field 'text'")
    parser.add_argument("--output", required=True)
    parser.add_argument("--format", choices=("text", "html"), default="text")
    parser.add_argument("--spacy-model", default=None)
    parser.add_argument("--lexicon", choices=LEXICON_BACKENDS, default=None)
    parser.add_argument("--lexicon-path", default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-attempts", type=int, default=None)
    parser.add_argument("--acceptance-probability", type=float, default=None)
    parser.add_argument("--allow-gaps", action="store_true", default=None, help="Let matches skip words")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--debug", action="store_true")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    setup_logging(log_file=args.log_file, debug=args.debug)

    settings = load_settings_from_env().with_overrides(
        spacy_model=args.spacy_model,
        lexicon_backend=args.lexicon,
        lexicon_path=args.lexicon_path,
        seed=args.seed,
        max_attempts=args.max_attempts,
        acceptance_probability=args.acceptance_probability,
        allow_gaps=args.allow_gaps,
    )
    tagger = SpacyTagger(model_name=settings.spacy_model)
    lexicon = build_lexicon(settings.lexicon_backend, settings.lexicon_path)
    rng = random.Random(settings.seed)
    render = render_html if args.format == "html" else render_text

    rows = []
    with open(args.input, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                rows.append(json.loads(line))

    found = 0
    outputs = []
    for row in rows:
        result = poemify_text(str(row.get("text") or ""), tagger, lexicon, settings=settings, rng=rng)
        if result.marked:
            found += 1
            logger.info("Poem: %s", result.poem)
        out = dict(row)
        out["poem"] = result.poem
        out["marked"] = result.marked
        out["marked_indices"] = result.marked_indices
        out["rendered"] = render(result.words)
        outputs.append(out)

    with open(args.output, "w", encoding="utf-8") as f:
        for out in outputs:
            f.write(json.dumps(out, ensure_ascii=False) + "\n")

    print(f"Saved {len(outputs)} rows ({found} with poems) to {args.output}")


if __name__ == "__main__":
    main()
