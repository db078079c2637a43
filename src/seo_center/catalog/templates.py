"""Static catalog of SEO task templates.

Every new project is seeded with one task per template, in this order.
"""

from dataclasses import dataclass

from src.seo_center.models.enums import Impact, Priority, SEOCategory


@dataclass(frozen=True, slots=True)
class TaskTemplate:
    """Everything a task needs except identity and runtime progress."""

    category: SEOCategory
    title: str
    description: str
    why_it_matters: str
    execution_steps: tuple[str, ...]
    tools_required: tuple[str, ...]
    expected_impact: Impact
    priority: Priority


_T = SEOCategory.TECHNICAL
_OP = SEOCategory.ON_PAGE
_C = SEOCategory.CONTENT
_OFF = SEOCategory.OFF_PAGE
_L = SEOCategory.LOCAL
_TR = SEOCategory.TRACKING

_TEMPLATES: tuple[TaskTemplate, ...] = (
    # Technical SEO
    TaskTemplate(
        _T,
        "Submit XML sitemap",
        "Generate an XML sitemap covering all indexable URLs and submit it to search engines.",
        "Sitemaps help crawlers discover pages quickly, especially on new or large sites.",
        (
            "Generate the sitemap with the CMS or a crawler",
            "Exclude noindex, redirected and canonicalized URLs",
            "Reference the sitemap in robots.txt",
            "Submit it in Google Search Console and Bing Webmaster Tools",
        ),
        ("Google Search Console", "Bing Webmaster Tools", "Screaming Frog"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _T,
        "Audit robots.txt",
        "Review robots.txt rules so important sections are crawlable and junk paths are blocked.",
        "A single wrong Disallow line can remove an entire site section from search.",
        (
            "Fetch the live robots.txt",
            "Test key URLs against the rules",
            "Block faceted, search and staging paths",
            "Add the sitemap location",
        ),
        ("Google Search Console", "robots.txt tester"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _T,
        "Enforce HTTPS site-wide",
        "Serve every page over HTTPS and 301 redirect all HTTP variants.",
        "HTTPS is a ranking signal and browsers flag insecure pages to visitors.",
        (
            "Verify the TLS certificate and its renewal",
            "Redirect http:// and non-canonical hosts with 301s",
            "Fix mixed-content resources",
            "Add an HSTS header",
        ),
        ("SSL Labs", "Screaming Frog", "Chrome DevTools"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _T,
        "Improve Core Web Vitals",
        "Bring LCP, INP and CLS into the good range on mobile and desktop templates.",
        "Page experience affects rankings and conversion rates.",
        (
            "Measure field data in the CrUX report",
            "Optimize the largest contentful element",
            "Defer non-critical JavaScript",
            "Reserve space for images, ads and embeds",
        ),
        ("PageSpeed Insights", "Lighthouse", "CrUX Dashboard"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _T,
        "Fix crawl errors and broken links",
        "Resolve 4xx and 5xx responses found by crawlers and in Search Console.",
        "Broken pages waste crawl budget and leak link equity.",
        (
            "Crawl the site and export error URLs",
            "Redirect or restore pages that have backlinks",
            "Update internal links pointing to errors",
            "Mark fixed issues as resolved in Search Console",
        ),
        ("Screaming Frog", "Google Search Console", "Ahrefs"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _T,
        "Implement canonical tags",
        "Add self-referencing canonicals and consolidate duplicate URL variants.",
        "Canonicals stop duplicate content from splitting ranking signals.",
        (
            "Identify duplicate and parameterized URLs",
            "Add rel=canonical to every indexable template",
            "Make canonicals absolute and HTTPS",
            "Verify Google's chosen canonical in URL Inspection",
        ),
        ("Screaming Frog", "Google Search Console"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _T,
        "Add structured data",
        "Mark up organization, breadcrumb, product or article entities with schema.org JSON-LD.",
        "Structured data enables rich results that increase click-through rate.",
        (
            "Choose schema types per template",
            "Add JSON-LD to the page templates",
            "Validate with the Rich Results Test",
            "Monitor enhancements reports for errors",
        ),
        ("Rich Results Test", "Schema Markup Validator", "Google Search Console"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _T,
        "Verify mobile-friendliness",
        "Check that every template renders and is usable on small screens.",
        "Google indexes the mobile version of pages first.",
        (
            "Test key templates on real devices",
            "Fix viewport, tap target and font size issues",
            "Ensure mobile and desktop content parity",
        ),
        ("Lighthouse", "Chrome DevTools"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _T,
        "Clean up redirect chains",
        "Collapse multi-hop redirects into single 301s.",
        "Every extra hop slows crawling and loses a little link equity.",
        (
            "Export redirect chains from a crawl",
            "Point each source directly at the final URL",
            "Update internal links to the final URL",
        ),
        ("Screaming Frog", "httpstatus.io"),
        Impact.LOW,
        Priority.MEDIUM,
    ),
    # On-page SEO
    TaskTemplate(
        _OP,
        "Optimize title tags",
        "Write unique, keyword-led title tags under roughly 60 characters for every page.",
        "Titles are a primary relevance signal and the headline in search results.",
        (
            "Export current titles",
            "Map a primary keyword to each page",
            "Rewrite missing, duplicate and truncated titles",
            "Put the brand at the end",
        ),
        ("Screaming Frog", "SEMrush", "Google Search Console"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _OP,
        "Write meta descriptions",
        "Add compelling, unique meta descriptions of about 150-160 characters.",
        "Good descriptions raise click-through rate from the results page.",
        (
            "List pages with missing or duplicate descriptions",
            "Summarize the page value with a call to action",
            "Include the primary keyword naturally",
        ),
        ("Screaming Frog", "SERP snippet preview"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _OP,
        "Fix heading hierarchy",
        "Use a single H1 per page and a logical H2-H6 outline.",
        "Clear headings help crawlers and readers understand page structure.",
        (
            "Audit H1 presence and uniqueness",
            "Restructure skipped or decorative headings",
            "Work secondary keywords into H2s",
        ),
        ("Screaming Frog", "HeadingsMap"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _OP,
        "Add image alt text",
        "Describe every meaningful image with concise alt text.",
        "Alt text drives image search visibility and accessibility.",
        (
            "Export images missing alt attributes",
            "Write descriptive alt text with context",
            "Use empty alt for decorative images",
        ),
        ("Screaming Frog", "WAVE"),
        Impact.LOW,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _OP,
        "Strengthen internal linking",
        "Link from high-authority pages to priority pages with descriptive anchors.",
        "Internal links distribute authority and help discovery.",
        (
            "Identify priority pages and orphan pages",
            "Add contextual links from related content",
            "Use descriptive, varied anchor text",
            "Keep important pages within three clicks of home",
        ),
        ("Screaming Frog", "Ahrefs", "Google Search Console"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _OP,
        "Clean up URL structure",
        "Use short, lowercase, hyphenated URLs that describe the page.",
        "Readable URLs improve click-through and keep the site hierarchy clear.",
        (
            "Audit URLs for parameters, IDs and uppercase",
            "Define a URL convention per section",
            "Redirect changed URLs with 301s",
        ),
        ("Screaming Frog",),
        Impact.LOW,
        Priority.LOW,
    ),
    TaskTemplate(
        _OP,
        "Add Open Graph and Twitter Card tags",
        "Provide social sharing metadata with title, description and image.",
        "Rich previews increase shares and referral traffic.",
        (
            "Add og:title, og:description, og:image and og:url",
            "Add twitter:card tags",
            "Validate previews with the platform debuggers",
        ),
        ("Facebook Sharing Debugger", "Twitter Card Validator"),
        Impact.LOW,
        Priority.LOW,
    ),
    TaskTemplate(
        _OP,
        "Optimize above-the-fold content",
        "Make the page purpose and primary keyword visible without scrolling.",
        "Visitors and quality raters judge relevance from the first screen.",
        (
            "Review the first screen of key templates",
            "Move the main heading and value proposition up",
            "Trim intrusive interstitials",
        ),
        ("Hotjar", "Chrome DevTools"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    # Content SEO
    TaskTemplate(
        _C,
        "Run keyword research",
        "Build a keyword list grouped by intent with volume and difficulty.",
        "Keyword research decides which content can win traffic.",
        (
            "Collect seed keywords from the client and competitors",
            "Expand with keyword tools",
            "Group by search intent",
            "Prioritize by volume, difficulty and business value",
        ),
        ("Ahrefs", "SEMrush", "Google Keyword Planner"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _C,
        "Map keywords to pages",
        "Assign one primary keyword cluster to each page.",
        "A keyword map prevents cannibalization and reveals content gaps.",
        (
            "List existing pages and their current rankings",
            "Assign clusters to pages",
            "Flag clusters that need new pages",
        ),
        ("Google Sheets", "Ahrefs"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _C,
        "Perform a content gap analysis",
        "Find topics competitors rank for that the site does not cover.",
        "Gaps are the fastest route to new ranking opportunities.",
        (
            "Pick three to five organic competitors",
            "Run a content gap report",
            "Turn findings into content briefs",
        ),
        ("Ahrefs", "SEMrush"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _C,
        "Refresh outdated content",
        "Update pages with declining traffic or stale information.",
        "Fresh, accurate content regains rankings faster than new pages.",
        (
            "Find pages with falling clicks year over year",
            "Update facts, examples and dates",
            "Expand thin sections",
            "Request re-indexing",
        ),
        ("Google Search Console", "Google Analytics"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _C,
        "Build a blog content calendar",
        "Plan recurring articles around priority keyword clusters.",
        "Consistent publishing builds topical authority over time.",
        (
            "Choose a realistic publishing cadence",
            "Schedule topics from the keyword map",
            "Assign writers and review dates",
        ),
        ("Notion", "Google Sheets"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _C,
        "Create pillar pages and topic clusters",
        "Publish comprehensive hub pages linked to supporting articles.",
        "Clusters signal depth on a topic and concentrate internal authority.",
        (
            "Choose two or three core topics",
            "Write a pillar page per topic",
            "Link supporting articles to and from the pillar",
        ),
        ("Ahrefs", "Surfer SEO"),
        Impact.HIGH,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _C,
        "Improve E-E-A-T signals",
        "Add author bios, credentials, sources and trust pages.",
        "Experience and trust signals matter most for YMYL topics.",
        (
            "Add author pages with credentials",
            "Cite authoritative sources",
            "Publish about, contact and policy pages",
        ),
        ("Google Search Quality Rater Guidelines",),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _C,
        "Consolidate thin and duplicate content",
        "Merge or remove low-value pages that compete with each other.",
        "Thin pages dilute site quality and split ranking signals.",
        (
            "Find pages with little content and no traffic",
            "Merge overlapping pages into one stronger page",
            "Redirect or noindex what remains",
        ),
        ("Screaming Frog", "Siteliner", "Google Analytics"),
        Impact.MEDIUM,
        Priority.LOW,
    ),
    # Off-page SEO
    TaskTemplate(
        _OFF,
        "Audit the backlink profile",
        "Review referring domains for quality, relevance and toxic links.",
        "Knowing the current profile guides link building and risk management.",
        (
            "Export referring domains",
            "Classify by authority and relevance",
            "Flag spammy or manipulative links",
        ),
        ("Ahrefs", "Majestic", "SEMrush"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _OFF,
        "Analyze competitor backlinks",
        "Find sites linking to competitors but not to the client.",
        "Competitor links reveal proven, attainable link sources.",
        (
            "Run a link intersect report",
            "Shortlist relevant domains",
            "Note the content type each link points to",
        ),
        ("Ahrefs", "SEMrush"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _OFF,
        "Run guest posting outreach",
        "Pitch and publish articles on relevant industry sites.",
        "Editorial links from relevant sites are strong authority signals.",
        (
            "Build a prospect list",
            "Personalize pitches with topic ideas",
            "Write and submit the articles",
            "Track published links",
        ),
        ("Hunter.io", "BuzzStream", "Google Sheets"),
        Impact.HIGH,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _OFF,
        "Reclaim broken backlinks",
        "Restore or redirect pages that lost backlinks to 404s.",
        "Reclaiming existing links is the cheapest link building there is.",
        (
            "Export backlinks pointing to 404 pages",
            "Redirect each URL to the closest live page",
            "Ask high-value sites to update the link",
        ),
        ("Ahrefs", "Screaming Frog"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _OFF,
        "Convert unlinked brand mentions",
        "Ask sites that mention the brand without linking to add a link.",
        "Mentions from sites that already know the brand convert well.",
        (
            "Set up brand mention alerts",
            "Filter mentions without links",
            "Send a short, friendly request",
        ),
        ("Google Alerts", "Ahrefs Alerts", "Mention"),
        Impact.MEDIUM,
        Priority.LOW,
    ),
    TaskTemplate(
        _OFF,
        "Publish digital PR assets",
        "Create data studies or tools that earn press coverage and links.",
        "Linkable assets attract authoritative links at scale.",
        (
            "Brainstorm newsworthy data angles",
            "Produce the asset with visuals",
            "Pitch journalists and bloggers",
        ),
        ("HARO", "Canva", "Google Sheets"),
        Impact.HIGH,
        Priority.LOW,
    ),
    TaskTemplate(
        _OFF,
        "Claim social profiles",
        "Create or complete brand profiles on major social platforms.",
        "Consistent profiles strengthen the brand entity and control branded results.",
        (
            "Reserve the brand handle on each platform",
            "Complete bios with the website link",
            "Link profiles from the website footer",
        ),
        ("Namechk",),
        Impact.LOW,
        Priority.LOW,
    ),
    TaskTemplate(
        _OFF,
        "Disavow toxic links",
        "Submit a disavow file for links that cannot be removed manually.",
        "Only needed after a manual action or a clear spam attack.",
        (
            "Request removal from site owners first",
            "Compile the disavow file at domain level",
            "Upload it in Search Console",
        ),
        ("Google Search Console", "Ahrefs"),
        Impact.LOW,
        Priority.LOW,
    ),
    # Local SEO
    TaskTemplate(
        _L,
        "Optimize Google Business Profile",
        "Claim, verify and complete the Google Business Profile listing.",
        "The profile drives map pack visibility and calls.",
        (
            "Claim and verify the listing",
            "Choose primary and secondary categories",
            "Add hours, services, photos and description",
            "Post updates regularly",
        ),
        ("Google Business Profile",),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _L,
        "Ensure NAP consistency",
        "Make name, address and phone identical across the site and listings.",
        "Inconsistent NAP data erodes trust in local rankings.",
        (
            "Define the canonical NAP format",
            "Audit the website footer and contact page",
            "Correct mismatched directory listings",
        ),
        ("BrightLocal", "Moz Local"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _L,
        "Build local citations",
        "List the business on relevant local and industry directories.",
        "Citations confirm the business location to search engines.",
        (
            "Find directories competitors are listed in",
            "Submit consistent listings",
            "Track submissions and approvals",
        ),
        ("BrightLocal", "Whitespark"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _L,
        "Set up a review generation process",
        "Ask happy customers for reviews and respond to every review.",
        "Review count, rating and responses influence local rankings and conversions.",
        (
            "Create a short review link",
            "Add review requests to the customer journey",
            "Reply to all reviews within a few days",
        ),
        ("Google Business Profile", "Trustpilot"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _L,
        "Create location landing pages",
        "Publish a unique page for each served location.",
        "Location pages capture 'service + city' searches.",
        (
            "List the served locations",
            "Write unique content per location",
            "Embed a map and local testimonials",
        ),
        ("Google Maps", "WordPress"),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _L,
        "Add LocalBusiness schema",
        "Mark up address, geo coordinates, hours and contact details.",
        "Local schema reinforces the business entity and location.",
        (
            "Generate LocalBusiness JSON-LD",
            "Add it to the home and contact pages",
            "Validate the markup",
        ),
        ("Schema Markup Validator", "Rich Results Test"),
        Impact.LOW,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _L,
        "Embed a location map",
        "Add an embedded map and driving directions to the contact page.",
        "Maps help visitors and reinforce the location signal.",
        (
            "Embed the map for the verified listing",
            "Add written directions and parking details",
        ),
        ("Google Maps",),
        Impact.LOW,
        Priority.LOW,
    ),
    # Tracking & analytics
    TaskTemplate(
        _TR,
        "Set up Google Analytics 4",
        "Install GA4 on every page and configure data retention and filters.",
        "Without analytics there is no way to prove SEO results.",
        (
            "Create the GA4 property",
            "Install the tag directly or through Tag Manager",
            "Exclude internal traffic",
            "Extend data retention",
        ),
        ("Google Analytics", "Google Tag Manager"),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _TR,
        "Verify Google Search Console",
        "Verify the domain property and grant access to the team.",
        "Search Console is the source of truth for indexing and search queries.",
        (
            "Verify with a DNS TXT record",
            "Add users with appropriate permissions",
            "Link Search Console to GA4",
        ),
        ("Google Search Console",),
        Impact.HIGH,
        Priority.CRITICAL,
    ),
    TaskTemplate(
        _TR,
        "Configure conversion tracking",
        "Track leads, sales and other key events as conversions.",
        "Conversions connect organic traffic to business outcomes.",
        (
            "Define the key events with the client",
            "Implement events through Tag Manager",
            "Mark them as conversions and test",
        ),
        ("Google Tag Manager", "Google Analytics"),
        Impact.HIGH,
        Priority.HIGH,
    ),
    TaskTemplate(
        _TR,
        "Set up rank tracking",
        "Track positions for the priority keywords weekly.",
        "Rank tracking shows progress before traffic moves.",
        (
            "Import the priority keywords",
            "Set the target location and device",
            "Tag keywords by cluster",
        ),
        ("SEMrush", "Ahrefs", "AccuRanker"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _TR,
        "Build a reporting dashboard",
        "Combine traffic, rankings and conversions into one client dashboard.",
        "A shared dashboard keeps the client informed without manual reports.",
        (
            "Connect GA4 and Search Console data sources",
            "Add organic traffic, conversions and top pages",
            "Schedule a monthly email delivery",
        ),
        ("Looker Studio",),
        Impact.MEDIUM,
        Priority.MEDIUM,
    ),
    TaskTemplate(
        _TR,
        "Record a baseline audit",
        "Capture starting metrics before work begins.",
        "A baseline is needed to measure the impact of the engagement.",
        (
            "Export current traffic, rankings and backlinks",
            "Save screenshots of key reports",
            "Store the baseline with the project proof",
        ),
        ("Google Analytics", "Google Search Console", "Ahrefs"),
        Impact.MEDIUM,
        Priority.HIGH,
    ),
    TaskTemplate(
        _TR,
        "Configure Bing Webmaster Tools",
        "Verify the site in Bing and import settings from Search Console.",
        "Bing also powers other search engines and AI assistants.",
        (
            "Import the site from Search Console",
            "Submit the sitemap",
            "Review the SEO reports",
        ),
        ("Bing Webmaster Tools",),
        Impact.LOW,
        Priority.LOW,
    ),
    TaskTemplate(
        _TR,
        "Set up uptime and change monitoring",
        "Get alerted when the site goes down or SEO-critical tags change.",
        "Catching accidental noindex tags or outages early prevents ranking losses.",
        (
            "Add uptime checks for key URLs",
            "Monitor robots.txt, titles and canonicals for changes",
            "Route alerts to the team",
        ),
        ("UptimeRobot", "ContentKing"),
        Impact.MEDIUM,
        Priority.LOW,
    ),
)


def all_templates() -> tuple[TaskTemplate, ...]:
    """Return the catalog in its fixed seeding order."""
    return _TEMPLATES
