"""HTML document served to crawlers."""

from html import escape

from seo_prerender.entities import PageMetadata


def render_page(
    metadata: PageMetadata,
    *,
    site_name: str,
    default_image_url: str,
    favicon_url: str,
) -> str:
    """Render the SEO page for an entity.

    Every interpolated value is HTML-escaped. ``og:image`` and
    ``twitter:image`` fall back to ``default_image_url``; the body only
    shows an ``<img>`` when the entity has its own image.
    """
    title = escape(metadata.title)
    description = escape(metadata.description)
    image = escape(metadata.image)
    meta_image = escape(metadata.image or default_image_url)
    canonical_url = escape(metadata.canonical_url)
    noun = escape(metadata.kind.value)

    image_tag = f'<img src="{image}" alt="{title}" />' if metadata.image else ""

    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <base href="/" />

    <!-- SEO Meta Tags -->
    <meta name="description" content="{description}" />
    <link rel="canonical" href="{canonical_url}" />

    <!-- Open Graph Meta Tags -->
    <meta property="og:title" content="{title}" />
    <meta property="og:description" content="{description}" />
    <meta property="og:image" content="{meta_image}" />
    <meta property="og:url" content="{canonical_url}" />
    <meta property="og:type" content="{escape(metadata.og_type)}" />
    <meta property="og:site_name" content="{escape(site_name)}" />

    <!-- Twitter Card Meta Tags -->
    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:title" content="{title}" />
    <meta name="twitter:description" content="{description}" />
    <meta name="twitter:image" content="{meta_image}" />

    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <link href="{escape(favicon_url)}" rel="shortcut icon" type="image/x-icon" />
  </head>
  <body>
    <main>
      <h1>{title}</h1>
      <p>{description}</p>
      {image_tag}
      <p><a href="{canonical_url}">View {noun} on {escape(site_name)}</a></p>
    </main>
  </body>
</html>
"""
