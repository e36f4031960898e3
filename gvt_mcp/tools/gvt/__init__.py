"""The on-disk version store: numbered snapshot directories plus two pointer files."""
