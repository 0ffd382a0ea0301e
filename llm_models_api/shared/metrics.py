#!/usr/bin/env python3
"""
Metrics definitions for the LLM Models API.
"""

import prometheus_client

UPSTREAM_FETCHES = prometheus_client.Counter(
    'upstream_fetches_total', 'Model list fetches sent to OpenRouter', ['outcome']
)
MODELS_CACHE_HITS = prometheus_client.Counter(
    'models_cache_hits_total', 'Model list requests served from the cache'
)
MODELS_CACHED = prometheus_client.Gauge('models_cached', 'Number of models held in the cache')
MODELS_SERVED = prometheus_client.Counter('models_served_total', 'Model records returned by /models')
