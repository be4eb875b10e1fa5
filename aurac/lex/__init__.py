"""Tokenizer for AURA source text."""