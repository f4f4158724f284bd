"""Keep a Mermaid diagram of an orchestration graph in sync inside a Markdown file."""
