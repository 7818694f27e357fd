"""
linerle package.

Line-oriented run-length encoder:
- one input line in, one encoded line out
- single shared output sink across all sources
- byte accounting reported once per invocation
"""
