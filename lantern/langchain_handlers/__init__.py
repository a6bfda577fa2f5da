"""LangChain prompt templates and output parsers for career augmentation."""
