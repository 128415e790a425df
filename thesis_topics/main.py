# =============================
# FILE: thesis_topics/main.py
# =============================
import argparse
import sys
from pathlib import Path

from .export.markdown_export import export_topics_markdown, render_topics_markdown
from .flow import FlowPhase, RequestState, TopicRequestFlow


def run(keywords: str, out_dir: Path | None = None, flow: TopicRequestFlow | None = None) -> RequestState:
    """Runs one submission and prints (optionally writes) the resulting outline."""
    flow = flow or TopicRequestFlow()
    state = flow.submit(RequestState(), keywords)
    if state.phase is not FlowPhase.SUCCESS:
        return state

    print(render_topics_markdown(state.topics, keywords))
    if out_dir is not None:
        export_topics_markdown(state.topics, str(out_dir), keywords)
    return state


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Suggest thesis topics for a set of keywords")
    ap.add_argument("--keywords", type=str, required=True, help="Comma-separated research keywords")
    ap.add_argument("--out_dir", type=Path, default=None, help="Also write thesis_topics.md to this folder")
    args = ap.parse_args(argv)

    state = run(args.keywords, args.out_dir)
    if state.error:
        print(state.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
