from typing import List
import os

from loguru import logger

from ..llm.schemas import ThesisTopic


def render_topics_markdown(topics: List[ThesisTopic], keywords: str = "") -> str:
    """
    Renders topics as a Markdown outline, one bullet per topic in the order given.
    """
    markdown_lines = ["# Thesis Topics\n"]
    if keywords.strip():
        markdown_lines.append(f"_Keywords: {keywords.strip()}_\n")

    for topic in topics:
        # Add the main topic
        markdown_lines.append(f"- **{topic.title}**")
        markdown_lines.append(f"  - {topic.description}")

        if topic.keywords:
            markdown_lines.append(f"  - Keywords: {', '.join(topic.keywords)}")

        # Research questions as sub-bullets
        for question in topic.potentialResearchQuestions or []:
            markdown_lines.append(f"    - {question}")

        markdown_lines.append("")  # Add a blank line for readability

    return "\n".join(markdown_lines)


def export_topics_markdown(topics: List[ThesisTopic], out_dir: str, keywords: str = "") -> str:
    """Writes the outline to ``out_dir/thesis_topics.md`` and returns its path."""
    os.makedirs(out_dir, exist_ok=True)
    md_path = os.path.join(out_dir, "thesis_topics.md")
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(render_topics_markdown(topics, keywords))

    logger.success(f"Exported thesis topics to {md_path}")
    return md_path
