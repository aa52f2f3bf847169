#!/usr/bin/env python3
"""
Interactive local form harness (no browser).

Usage:
  CLASSIFIER_PROVIDER=mock python3 scripts/classify_local.py

What it does:
- Creates one in-memory form session
- Lets you set features as `feature=value` through the same FormStateController
- Submits through SubmitClassificationUseCase and prints the result and any toasts
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.exceptions import IncompleteSelectionError, SubmissionInFlightError
from app.domain.entities.classification_result import safety_notice_for
from app.domain.entities.feature_catalog import FEATURE_GROUPS, MUSHROOM_FEATURES, format_feature_name
from app.wiring.dependencies import get_form_controller, get_form_store, get_submit_use_case


def _print_header(session_id: str) -> None:
    print("\nLocal Mushroom Classifier")
    print("-" * 60)
    print(f"session_id: {session_id}")
    print("Set a feature with feature=value, e.g. odor=almond")
    print("Commands: /features, /random, /progress, /submit, /clear, /reset, /quit, /help")
    print("-" * 60)


def _print_features() -> None:
    for group in FEATURE_GROUPS:
        print(f"\n{group.title}")
        for feature in group.features:
            print(f"  {feature}: {', '.join(MUSHROOM_FEATURES[feature])}")


def main() -> None:
    store = get_form_store()
    controller = get_form_controller()
    use_case = get_submit_use_case()
    session_id = store.create_session()
    _print_header(session_id)

    while True:
        try:
            text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not text:
            continue

        cmd = text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_header(session_id)
            continue
        if cmd == "/features":
            _print_features()
            continue
        if cmd == "/random":
            for feature, options in MUSHROOM_FEATURES.items():
                value = random.choice(options)
                store.update_state(session_id, lambda state: controller.set_feature_value(state, feature, value))
            print("All features filled with random values.")
            continue
        if cmd == "/progress":
            state = store.get_state(session_id)
            selected, total = controller.compute_progress(state)
            print(f"{selected}/{total} features")
            print(f"complete groups: {', '.join(sorted(state.completed_groups)) or '-'}")
            continue
        if cmd == "/clear":
            store.update_state(session_id, controller.clear_result)
            print("Result cleared.")
            continue
        if cmd == "/reset":
            store.update_state(session_id, controller.reset)
            print("Form reset.")
            continue
        if cmd == "/submit":
            try:
                state = use_case.execute(session_id)
            except (IncompleteSelectionError, SubmissionInFlightError):
                state = store.get_state(session_id)
            for toast in store.drain_notifications(session_id):
                print(f"[{toast.level}] {toast.message}")
            if state.result.status != "absent":
                print(f"Prediction: {state.result.label}")
            notice = safety_notice_for(state.result)
            if notice:
                print(f"!! {notice.title}: {notice.lead} {notice.emphasis.upper()} {notice.body}".replace("  ", " "))
            continue

        feature, sep, value = text.partition("=")
        if not sep:
            print("Unrecognised input. Use feature=value or /help.")
            continue
        try:
            store.update_state(
                session_id, lambda state: controller.set_feature_value(state, feature.strip(), value.strip())
            )
        except ValueError as e:
            print(f"Error: {e}")
            continue
        print(f"{format_feature_name(feature.strip())} set.")


if __name__ == "__main__":
    main()
