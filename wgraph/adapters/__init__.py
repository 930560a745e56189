"""Optional converters between wgraph and other graph libraries."""
