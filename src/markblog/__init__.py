"""markblog: a minimal multi-user blogging service."""

__version__ = "0.1.0"
