"""Text analysis engine: pure functions from raw text to metrics.

Entrypoints:
- analyzer.analyze(text) / analyzer.TextAnalyzer
- tokenizer.tokenize, tokenizer.split_words
- sentiment.score_sentiment, linguistic.analyze_linguistics,
  frequency.rank_frequencies
"""
