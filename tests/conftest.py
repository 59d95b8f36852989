"""Test configuration and fixtures."""

import httpx
import pytest

from feedcore.models.options import FetchOptions
from feedcore.services.feed_service import FeedService
from feedcore.transport.http import HttpTransport


@pytest.fixture
def sample_rss_content() -> bytes:
    """Sample RSS 2.0 document."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Example Engineering Blog</title>
    <link>https://blog.example.com/</link>
    <description>Notes from the  engineering team</description>
    <language>en-us</language>
    <pubDate>Thu, 19 Dec 2024 00:00:00 GMT</pubDate>
    <item>
      <title>Shipping the new parser</title>
      <link>https://blog.example.com/posts/parser</link>
      <description>&lt;p&gt;We rewrote the parser.&lt;/p&gt;</description>
      <content:encoded><![CDATA[<p>Full text of the post.</p>]]></content:encoded>
      <dc:creator>Jane Smith</dc:creator>
      <guid isPermaLink="false">post-1001</guid>
      <pubDate>Thu, 19 Dec 2024 08:30:00 GMT</pubDate>
      <category>parsing</category>
      <category>release</category>
      <enclosure url="https://cdn.example.com/episode1.mp3" length="1024" type="audio/mpeg"/>
    </item>
    <item>
      <title>Second post</title>
      <guid>https://blog.example.com/posts/second</guid>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def sample_atom_content() -> bytes:
    """Sample Atom 1.0 document."""
    return b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="en">
  <title>Example Atom Feed</title>
  <subtitle>All the news</subtitle>
  <link href="https://atom.example.com/"/>
  <link rel="self" href="https://atom.example.com/feed.atom"/>
  <updated>2024-12-19T10:30:00Z</updated>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <entry>
    <title>Atom entry</title>
    <link href="/entries/1"/>
    <link rel="enclosure" href="https://cdn.example.com/talk.mp4" type="video/mp4"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2024-12-19T10:30:00Z</updated>
    <published>2024-12-18T09:00:00Z</published>
    <author><name>John Doe</name></author>
    <summary>Short summary</summary>
    <content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml"><p>Hello</p></div></content>
    <category term="news"/>
  </entry>
</feed>"""


@pytest.fixture
def sample_rdf_content() -> bytes:
    """Sample RSS 1.0 document whose table of contents reverses item order."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/"
         xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel rdf:about="https://rdf.example.com/">
    <title>RDF Site</title>
    <link>https://rdf.example.com/</link>
    <description>An RSS 1.0 channel</description>
    <dc:language>de</dc:language>
    <items>
      <rdf:Seq>
        <rdf:li rdf:resource="https://rdf.example.com/b"/>
        <rdf:li rdf:resource="https://rdf.example.com/a"/>
      </rdf:Seq>
    </items>
  </channel>
  <item rdf:about="https://rdf.example.com/a">
    <title>Item A</title>
    <link>https://rdf.example.com/a</link>
    <dc:creator>Alice</dc:creator>
    <dc:date>2024-12-19T08:00:00+01:00</dc:date>
    <dc:subject>science</dc:subject>
  </item>
  <item rdf:about="https://rdf.example.com/b">
    <title>Item B</title>
    <link>https://rdf.example.com/b</link>
  </item>
</rdf:RDF>"""


@pytest.fixture
def minimal_atom_content() -> bytes:
    return b'<feed xmlns="http://www.w3.org/2005/Atom"><title>Empty</title></feed>'


@pytest.fixture
def make_transport():
    """Build an HttpTransport answering requests with a handler instead of the network."""

    def factory(handler, **option_overrides) -> HttpTransport:
        return HttpTransport(
            FetchOptions(**option_overrides),
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def make_service(make_transport):
    """Build a FeedService on top of a mocked transport."""

    def factory(handler, **option_overrides) -> FeedService:
        return FeedService(make_transport(handler, **option_overrides))

    return factory
