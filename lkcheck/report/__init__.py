from .render import to_markdown
