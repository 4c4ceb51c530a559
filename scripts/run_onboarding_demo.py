#!/usr/bin/env python3
"""
Run a full onboarding wizard flow against the configured step service and
print each stage to the terminal.

Uses the mock step service unless INTEGRATIONS_MODE=real (or a step service
URL) is configured.

Usage (from repo root):
  python scripts/run_onboarding_demo.py [--business]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.integrations.selection import select_coverage_client, select_step_service
from src.onboarding import CoverageCatalog, InputKind, OnboardingController
from src.onboarding.summary import review_summary
from src.utils.config_loader import load_onboarding_config


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


async def submit(controller: OnboardingController) -> None:
    step = controller.current_step.value
    moved = await controller.next()
    if not moved:
        print_stage(f"STEP {step} FAILED", controller.error or "no change")
        raise SystemExit(1)
    print_stage(f"STEP {step} SAVED -> {controller.current_step.value}", controller.record.to_wire())


async def main():
    parser = argparse.ArgumentParser(description="Run the onboarding wizard end to end")
    parser.add_argument("--business", action="store_true", help="Onboard a business client (adds the DRIVER step)")
    args = parser.parse_args()

    setup_logging()
    config = load_onboarding_config()
    controller = OnboardingController(select_step_service(config))
    catalog = CoverageCatalog(select_coverage_client(config))

    options = await catalog.get_options()
    print_stage("COVERAGE OPTIONS", options)

    # --- ACCOUNT ---
    if args.business:
        controller.on_client_type_change("BUSINESS")
        controller.on_field_change("businessName", "Atlas Logistics SARL")
        controller.on_field_change("registerOfCommerce", "RC-123456")
    else:
        controller.on_client_type_change("PERSON")
        controller.on_field_change("firstName", "Ana")
        controller.on_field_change("lastName", "Popescu")
        controller.on_field_change("birthDate", "1990-05-15", InputKind.DATE)
    controller.on_field_change("email", "ana.popescu@example.com")
    controller.on_field_change("city", "Casablanca")
    await submit(controller)

    # --- DRIVER (business only) ---
    if args.business:
        controller.on_field_change("driverFirstName", "Youssef")
        controller.on_field_change("driverLastName", "Benali")
        controller.on_field_change("categoryLicense", "B")
        await submit(controller)

    # --- VEHICLE ---
    controller.on_field_change("vehiclePlate", "12345-A-6")
    controller.on_field_change("vehicleMake", "Dacia")
    controller.on_field_change("vehicleModel", "Logan")
    controller.on_field_change("vehicleFuelType", "Diesel")
    controller.on_field_change("vehicleNumberOfPassengers", "5", InputKind.NUMBER)
    controller.on_field_change("vehicleFiscalHorsepower", "6", InputKind.NUMBER)
    controller.on_field_change("vehicleValue", "120000", InputKind.NUMBER)
    controller.on_field_change("vehicleIsNew", True, InputKind.CHECKBOX)
    await submit(controller)

    # --- REVIEW ---
    await submit(controller)

    # --- COVERAGES ---
    controller.on_coverages_change([o["value"] for o in options[:3]])
    controller.on_period_change("12")
    await submit(controller)
    print_stage("REVIEW SUMMARY", review_summary(controller.record))

    # --- FINALIZE ---
    await submit(controller)
    print_stage("CONTRACT", review_summary(controller.record))

    # --- DOWNLOAD ---
    await submit(controller)

    controller.done()
    print("\n" + "=" * 60)
    print(f"  Demo complete. Final step: {controller.current_step.value}")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
