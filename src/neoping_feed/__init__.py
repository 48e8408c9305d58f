"""Neoping feed backend: posts, news, likes, comments and bookmarks."""
