"""Adversarial sample inputs printed by ``urlcanon demo``."""

SAMPLE_URLS: tuple[str, ...] = (
    "http://host/%25%32%35",
    "http://host/%25%32%35%25%32%35",
    "http://host/%2525252525252525",
    "http://host/asdf%25%32%35asd",
    "http://host/%%%25%32%35asd%%",
    "http://www.google.com/",
    "http://%31%36%38%2e%31%38%38%2e%39%39%2e%32%36/%2E%73%65%63%75%72%65/%77%77%77%2E%65%62%61%79%2E%63%6F%6D/",
    "http://195.127.0.11/uploads/%20%20%20%20/.verify/.eBaysecure=updateuserdataxplimnbqmn-xplmvalidateinfoswqpcmlx=hgplmcx/",
    "http://host%23.com/%257Ea%2521b%2540c%2523d%2524e%25f%255E00%252611%252A22%252833%252944_55%252B",
    "http://3279880203/blah",
    "http://www.google.com/blah/..",
    "www.google.com/",
    "www.google.com",
    "http://www.evil.com/blah#frag",
    "http://www.GOOgle.com/",
    "http://www.google.com.../",
    "http://www.google.com/foo\tbar\rbaz\n2",
    "http://www.google.com/q?",
    "http://www.google.com/q?r?",
    "http://www.google.com/q?r?s",
    "http://evil.com/foo#bar#baz",
    "http://evil.com/foo;",
    "http://evil.com/foo?bar;",
    "http://\x01\x80.com/",
    "http://notrailingslash.com",
    "http://www.gotaport.com:1234/",
    "  http://www.google.com/  ",
    "http:// leadingspace.com/",
    "http://%20leadingspace.com/",
    "%20leadingspace.com/",
    "https://www.securesite.com/",
    "http://host.com/ab%23cd",
    "http://host.com//twoslashes?more//slashes",
    "почта@престашоп.рф",
    "modulez.ru",
    "xn--80aj2abdcii9c.xn--p1ai",
    "xn--80a1acn3a.xn--j1amh",
    "xn--srensen-90a.example.com",
    "xn--mxahbxey0c.xn--xxaf0a",
    "xn--fsqu00a.xn--4rr70v",
    "xn--престашоп.xn--рф",
    "xn--prestashop.рф",
    "münchen.de",
)
