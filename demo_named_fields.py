"""
Demo: Serialize the example article with and without named selectors.
"""

from jsonbuilder import JSONBuilder, to_json
from jsonbuilder.examples import build_example_article
from jsonbuilder.text import tree_to_json, tree_to_yaml


def main():
    article = build_example_article()

    print("=" * 70)
    print("FULL ARTICLE")
    print("=" * 70)
    print(tree_to_json(to_json(article), indent=2))
    print()

    for name in ("summary", "listing", "unknown"):
        print(f"--- selector: {name}")
        print(tree_to_json(to_json(article, name), indent=2))
        print()

    response = (
        JSONBuilder.new_instance()
        .add_object("article", article, "summary")
        .add_object("author", article.author, "public")
        .add_node("comment_count", len(article.comments))
        .build_json()
    )
    print("=" * 70)
    print("COMPOSED RESPONSE (YAML)")
    print("=" * 70)
    print(tree_to_yaml(response))


if __name__ == "__main__":
    main()
