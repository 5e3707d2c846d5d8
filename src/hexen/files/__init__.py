"""File collection — loading and ordering the files being viewed."""

from hexen.files.collection import FileCollection, FileNotLoaded, LoadError, load_file

__all__ = ["FileCollection", "FileNotLoaded", "LoadError", "load_file"]
