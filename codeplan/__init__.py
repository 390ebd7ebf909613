"""
Codeplan - Request decomposition for code generation

Turns a free-text software request into:
- A lexical analysis (tokens, tags, entity buckets)
- An interpreted request (language, framework, platform, scores)
- A dependency-ordered graph of typed tasks
"""

__version__ = "0.1.0"
