"""Crawl engine: graph model, URL resolver, fetcher and the site traversal."""
