"""Shared type definitions for nextroutes."""

from typing import TypeAlias

# File path as returned by the directory walker (e.g., "pages/posts/[id].tsx")
RawFilePath: TypeAlias = str

# Name of a dynamic segment parameter (e.g., "id" for "[id]")
ParamName: TypeAlias = str

# Normalized route path (e.g., "/posts/[id]")
RoutePath: TypeAlias = str
