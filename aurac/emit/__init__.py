"""Writer for ``.atlas`` alignment files."""