"""Example script for a verbose recall report."""

import json

from diffmemo.evaluation import evaluate_recall


def main() -> None:
    reference = (
        "Four score and seven years ago our fathers brought forth on this "
        "continent, a new nation, conceived in Liberty."
    )
    recalled = "Four score and seven years ago our fathers brought forth a nation"

    report = evaluate_recall(reference, recalled, verbose=True)
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
