SITEMAP_GENERATED = 'SITEMAP_GENERATED'
SITEMAP_DEGRADED = 'SITEMAP_DEGRADED'
