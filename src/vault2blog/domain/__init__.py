"""Document model for vault notes: sections, frontmatter schema, markup codec."""
