#!/usr/bin/env python3
"""
Demo: Apply breakpoints to the example stylesheet.

Shows the resolved media queries for the default and "only screen" configs.
"""

from mqbreakpoints import TransformConfig, transform_stylesheet
from mqbreakpoints.examples import build_example_stylesheet
from mqbreakpoints.serialization import media_map_to_yaml, stylesheet_to_yaml


def main():
    print("=" * 80)
    print("BREAKPOINTS DEMO")
    print("=" * 80)

    configs = [
        ("default", TransformConfig()),
        ("only screen", TransformConfig(use_only=True)),
    ]

    for label, config in configs:
        print(f"\n{label.upper()}:")
        print("-" * 80)

        stylesheet = build_example_stylesheet()
        result = transform_stylesheet(stylesheet, config)

        print("Resolved media queries:")
        print(media_map_to_yaml(result.media_map))
        print(f"Rewrote {result.rewritten} of {len(result.media_rules)} media rules")
        print()
        print(stylesheet_to_yaml(stylesheet))

    print("=" * 80)


if __name__ == "__main__":
    main()
