"""
Technical Data Sheet Generator

Modules:
    models      - Data models (ProductRecord, AttributeEntry, SitemapShard)
    common      - Shared utilities (config loader, logging, HTTP client, text utils)
    storage     - Blob storage, sitemap cache, profiles, generated documents
    discovery   - Product URL lookup from the retailer's sitemaps
    extraction  - Product page parsing and batch extraction
    rendering   - Printable HTML card rendering
"""
