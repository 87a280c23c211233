"""Tests for page metadata, structured data, robots.txt and sitemap.xml."""

from __future__ import annotations

import json
import unittest

from techblog.content.posts import PostMeta
from techblog.site.metadata import (
    generate_blog_metadata,
    generate_structured_data,
    json_ld,
    render_meta_tags,
)
from techblog.site.seo import robots_txt, sitemap_xml

BASE = "https://blog.example.com"


def _meta(**kwargs: object) -> PostMeta:
    data: dict[str, object] = {
        "title": "From Zero to Deployed",
        "description": "Docker in an hour.",
        "slug": "deploy-docker-with-ai",
        "published_time": "2025-10-01T00:00:00.000Z",
        "tags": ["docker", "deployment"],
        "author": "Jane Doe",
    }
    data.update(kwargs)
    return PostMeta.model_validate(data)


class TestBlogMetadata(unittest.TestCase):
    def test_canonical_and_open_graph(self) -> None:
        page = generate_blog_metadata(_meta(), base_url=BASE + "/")
        self.assertEqual(page.canonical, f"{BASE}/blog/deploy-docker-with-ai")
        self.assertEqual(page.open_graph.type, "article")
        self.assertEqual(page.open_graph.images[0].url, f"{BASE}/og-image.png")
        self.assertEqual((page.open_graph.images[0].width, page.open_graph.images[0].height), (1200, 630))
        self.assertEqual(page.twitter.card, "summary_large_image")
        self.assertEqual(page.keywords, ["docker", "deployment"])

    def test_meta_tags_are_escaped(self) -> None:
        page = generate_blog_metadata(_meta(title='Quotes "and" <tags>'), base_url=BASE)
        tags = render_meta_tags(page)
        self.assertIn('content="Quotes &quot;and&quot; &lt;tags&gt;"', tags)
        self.assertIn(f'<link rel="canonical" href="{BASE}/blog/deploy-docker-with-ai">', tags)
        self.assertIn('<meta property="article:tag" content="docker">', tags)


class TestStructuredData(unittest.TestCase):
    def test_blog_posting(self) -> None:
        data = generate_structured_data(_meta(), base_url=BASE)
        self.assertEqual(data["@type"], "BlogPosting")
        self.assertEqual(data["author"], {"@type": "Person", "name": "Jane Doe"})
        self.assertEqual(data["dateModified"], data["datePublished"])
        self.assertEqual(data["keywords"], "docker, deployment")

    def test_absent_fields_are_omitted(self) -> None:
        data = generate_structured_data(_meta(published_time=None, tags=[]), base_url=BASE)
        self.assertNotIn("datePublished", data)
        self.assertNotIn("keywords", data)

    def test_json_ld_cannot_close_script(self) -> None:
        payload = json_ld({"headline": "</script><script>alert(1)</script>"})
        self.assertNotIn("</script>", payload)
        self.assertEqual(json.loads(payload)["headline"], "</script><script>alert(1)</script>")


class TestSeo(unittest.TestCase):
    def test_robots(self) -> None:
        text = robots_txt(BASE)
        self.assertIn("User-Agent: *\nAllow: /\nDisallow: /api/\nDisallow: /admin/", text)
        for agent in ("GPTBot", "ChatGPT-User", "Google-Extended", "Claude-Web", "anthropic-ai"):
            self.assertIn(f"User-Agent: {agent}\nAllow: /", text)
        self.assertTrue(text.rstrip().endswith(f"Sitemap: {BASE}/sitemap.xml"))

    def test_sitemap_lists_home_and_posts(self) -> None:
        posts = [
            _meta(),
            _meta(slug="getting-started", published_time="2025-09-30", modified_time="2025-10-05"),
        ]
        xml = sitemap_xml(posts, base_url=BASE)
        self.assertIn(f"<loc>{BASE}/</loc>", xml)
        self.assertIn(f"<loc>{BASE}/blog/getting-started</loc>", xml)
        self.assertIn("<lastmod>2025-10-05</lastmod>", xml)
        self.assertEqual(xml.count("<url>"), 3)


if __name__ == "__main__":
    unittest.main()
