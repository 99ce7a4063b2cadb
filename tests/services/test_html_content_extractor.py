from wordcrawl.services.html_content_extractor import HtmlContentExtractor


def test_extracts_words_and_absolute_links():
    html = (
        '<html><head><title>Title</title><style>p { color: red }</style></head>'
        '<body><p>Hello <b>World</b></p><a href="/foo">Foo</a>'
        '<a href="http://bar.com">Bar</a><script>var x = 1;</script></body></html>'
    )
    words, links = HtmlContentExtractor().extract("http://example.com/page", html)

    assert words == ["Title", "Hello", "World", "Foo", "Bar"]
    assert links == ["http://example.com/foo", "http://bar.com"]


def test_skips_anchors_without_href():
    html = '<a name="top">Top</a><a href="">Empty</a><a href="next.html">Next</a>'
    _, links = HtmlContentExtractor().extract("http://example.com/dir/index.html", html)

    assert links == ["http://example.com/dir/next.html"]


def test_resolves_relative_file_links():
    html = '<a href="../other/page.html">Other</a>'
    _, links = HtmlContentExtractor().extract("file:///tmp/site/docs/index.html", html)

    assert links == ["file:///tmp/site/other/page.html"]


def test_empty_body():
    assert HtmlContentExtractor().extract("http://example.com", "") == ([], [])
    assert HtmlContentExtractor().extract("http://example.com", None) == ([], [])
