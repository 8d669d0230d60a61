"""
Example stylesheet builder for the documented palm/tab/desk setup.

    :root {
      breakpoint-palm: max 340px;
      breakpoint-tab: max 700px;
      breakpoint-desk: min 1000px;
    }
    .palm { display: none; }
    @media palm { .palm { display: block; } }
    @media tab-and-down { .tab-and-down { display: block; } }
    @media desk { body > aside { width: 33%; } }
"""
from mqbreakpoints.stylesheet import Stylesheet, decl, media, rule


def build_example_stylesheet(use_var_syntax: bool = False) -> Stylesheet:
    prefix = "var-breakpoint-" if use_var_syntax else "breakpoint-"

    root = rule(
        ":root",
        decl(prefix + "palm", "max 340px"),
        decl(prefix + "tab", "max 700px"),
        decl(prefix + "desk", "min 1000px"),
    )

    return Stylesheet(rules=[
        root,
        rule(".palm", decl("display", "none")),
        media("palm", rule(".palm", decl("display", "block"))),
        media("tab-and-down", rule(".tab-and-down", decl("display", "block"))),
        media("desk", rule("body > aside", decl("width", "33%"))),
    ])
