"""SFT Pro - turn PDF/DOCX documents into JSONL fine-tuning data with a local Ollama model."""

__version__ = "0.1.0"
