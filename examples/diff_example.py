"""Example script: diff a recalled passage and read the markup back."""

from diffmemo import compute_diff, markup_to_text


def main() -> None:
    reference = "The quick brown fox jumped over the lazy dog."
    recalled = "The quick fox jumped\nover the very lazy dog"

    diff = compute_diff(reference, recalled)
    print(f"extra: {diff.extra_count}, missing: {diff.missing_count}")
    print(diff.html)

    print("\nSegments")
    for segment in diff.segments:
        print(dict(segment))

    print("\nRead back")
    print(markup_to_text(diff.html))


if __name__ == "__main__":
    main()
