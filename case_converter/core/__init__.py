"""Shared conversion pipeline.

WHY: kebab, dot, and camel conversion differ only in how the final word
list is joined. Keeping normalization, filtering, and tokenization in
one place guarantees every style sees exactly the same words.

HOW: options.py validates configuration, normalizer.py canonicalizes
input, filters.py collapses separators and strips punctuation,
tokenizer.py splits words, assembler.py hands tokens to a style, and
casing.py provides the locale-aware case mapping styles use.

RULES:
- Data flows strictly forward: normalize → filter → tokenize → assemble
- No stage keeps state between calls
- Style-specific logic lives in case_converter.styles, never here
"""
