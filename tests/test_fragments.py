from markupsafe import Markup

from profilesite.fragments import (
    opens_new_context,
    render_contact_link,
    render_contact_section,
    render_details,
    render_menu,
    render_personal,
    render_tags,
    render_tags_section,
    render_timeline_section,
)


def timeline(items, **extra):
    section = {"id": "experience", "title": "Experience", "type": "timeline", "items": items}
    section.update(extra)
    return section


def test_personal_header_fields():
    html = render_personal({"name": "Alex", "title": "Engineer", "bio": "Hi"})
    assert '<section id="personal">' in html
    assert '<h1 class="name">Alex</h1>' in html
    assert '<p class="title">Engineer</p>' in html
    assert '<p class="bio">Hi</p>' in html
    assert "<img" not in html


def test_personal_header_omits_missing_fields():
    html = render_personal({"name": "Alex"})
    assert '<h1 class="name">Alex</h1>' in html
    assert 'class="title"' not in html
    assert 'class="bio"' not in html
    assert "<main>" not in html
    assert "None" not in html


def test_personal_header_image():
    html = render_personal({"name": "Alex", "image": "images/me.png"})
    assert '<img class="profile-image" src="images/me.png" alt="Alex">' in html


def test_values_are_escaped():
    html = render_personal({"name": "<script>alert(1)</script>", "bio": "a & b"})
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "a &amp; b" in html


def test_attribute_values_are_escaped():
    html = render_contact_link({"url": 'x" onclick="evil()', "icon": "", "label": "L"})
    assert 'onclick="evil()"' not in html
    assert "&#34;" in html


def test_fragments_are_markup():
    assert isinstance(render_personal({"name": "Alex"}), Markup)
    assert isinstance(render_timeline_section(timeline([{"title": "Dev"}])), Markup)


def test_timeline_one_block_per_item_in_order():
    items = [{"title": "First"}, {"title": "Second"}, {"title": "Third"}]
    html = render_timeline_section(timeline(items))
    assert html.count('<div class="item">') == 3
    assert html.index("First") < html.index("Second") < html.index("Third")


def test_timeline_item_optional_parts():
    html = render_timeline_section(timeline([{"title": "Dev", "subtitle": "Acme"}]))
    assert '<span class="item-subtitle">Acme</span>' in html
    for cls in ("item-location", "item-duration", "item-description",
                "item-details", "item-tags"):
        assert cls not in html


def test_timeline_item_all_parts():
    item = {
        "title": "Dev",
        "subtitle": "Acme",
        "location": "Berlin",
        "duration": "2020",
        "description": "Built things",
        "details": ["one", "two"],
        "tags": ["Python"],
    }
    html = render_timeline_section(timeline([item]))
    assert '<span class="item-location"> • Berlin</span>' in html
    assert '<span class="item-duration">2020</span>' in html
    assert '<p class="item-description">Built things</p>' in html
    assert '<ul class="item-details"><li>one</li><li>two</li></ul>' in html
    assert '<div class="item-tags"><span class="tag">Python</span></div>' in html


def test_timeline_item_with_url_is_a_link():
    html = render_timeline_section(timeline([{"title": "Site", "url": "https://example.com"}]))
    assert '<a href="https://example.com" class="item-link" target="_blank"' in html
    assert html.index('class="item-link"') < html.index('<div class="item">')


def test_timeline_item_with_relative_url_stays_in_place():
    html = render_timeline_section(timeline([{"title": "Post", "url": "posts/one.html"}]))
    assert '<a href="posts/one.html" class="item-link">' in html


def test_section_heading_link():
    html = render_timeline_section(timeline([{"title": "Dev"}], link="work"))
    assert '<a href="#work" class="section-title-link">Experience</a>' in html

    plain = render_timeline_section(timeline([{"title": "Dev"}]))
    assert '<h2 class="section-title">Experience</h2>' in plain


def test_section_wrapper_carries_id():
    html = render_timeline_section(timeline([{"title": "Dev"}]))
    assert '<section class="section timeline" id="experience">' in html


def test_empty_helpers_render_nothing():
    assert render_details([]) == ""
    assert render_tags([]) == ""
    assert render_menu([]) == ""


def test_tags_section_in_order():
    section = {"id": "interests", "title": "Interests", "type": "tags",
               "items": ["Cycling", "Chess"]}
    html = render_tags_section(section)
    assert '<section class="section tags" id="interests">' in html
    assert '<span class="tag">Cycling</span><span class="tag">Chess</span>' in html


def test_opens_new_context():
    assert opens_new_context("https://gh.com/x")
    assert opens_new_context("http://example.com")
    assert opens_new_context("files/cv.pdf")
    assert not opens_new_context("files/CV.PDF")
    assert not opens_new_context("mailto:a@b.com")
    assert not opens_new_context("#contact")
    assert not opens_new_context("")
    assert not opens_new_context(None)


def test_contact_links_new_context_rule():
    section = {
        "id": "contact",
        "title": "Contact",
        "type": "links",
        "items": [
            {"url": "mailto:a@b.com", "icon": "✉", "label": "Email"},
            {"url": "https://gh.com/x", "icon": "gh", "label": "GitHub"},
        ],
    }
    html = render_contact_section(section)
    email = render_contact_link(section["items"][0])
    github = render_contact_link(section["items"][1])
    assert "target=" not in email
    assert 'target="_blank"' in github
    assert email in html and github in html
    assert html.index("Email") < html.index("GitHub")


def test_contact_icon_image_or_text():
    image = render_contact_link({"url": "https://x.com", "icon": "img/x.svg", "label": "X"})
    assert '<img src="img/x.svg" alt="X" class="contact-icon">' in image

    glyph = render_contact_link({"url": "mailto:a@b.com", "icon": "✉", "label": "Email"})
    assert '<span class="contact-icon">✉</span>' in glyph
    assert '<span class="contact-label">Email</span>' in glyph


def test_menu_links_sections():
    html = render_menu([{"id": "experience", "title": "Experience"},
                        {"id": "contact", "title": "Contact"}])
    assert 'data-section="experience"' in html
    assert 'href="#contact"' in html
    assert html.index("experience") < html.index("contact")


def test_uppercase_pdf_link_stays_in_place():
    html = render_contact_link({"url": "files/CV.PDF", "icon": "", "label": "CV"})
    assert "target=" not in html

    html = render_contact_link({"url": "files/cv.pdf", "icon": "", "label": "CV"})
    assert 'target="_blank"' in html


def test_section_id_title_and_link_are_escaped():
    section = {
        "id": 'x" onmouseover="evil()',
        "title": "<b>Work</b> & play",
        "link": 'top"><script>',
        "type": "tags",
        "items": ["a"],
    }
    html = render_tags_section(section)
    assert 'onmouseover="evil()"' not in html
    assert 'id="x&#34; onmouseover=&#34;evil()"' in html
    assert "<b>" not in html
    assert "&lt;b&gt;Work&lt;/b&gt; &amp; play" in html
    assert "<script>" not in html
    assert 'href="#top&#34;&gt;&lt;script&gt;"' in html
