"""vault2blog: publish Obsidian vault notes into a blog content tree."""

__version__ = "0.1.0"
