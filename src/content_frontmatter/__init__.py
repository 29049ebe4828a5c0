"""
Content Frontmatter - front-matter loading for static-site content.

This package reads Markdown content files, splits off their ``---``
(YAML) or ``+++`` (TOML) front-matter block, decodes and validates it,
and yields immutable Document records for an external renderer.

Main entry points:
    - content_frontmatter.main: CLI entrypoint
    - content_frontmatter.core.loader: load_document() and load_file()
    - content_frontmatter.core.batch: load_many() for many files
    - content_frontmatter.models.config: Config and load_env()
"""
