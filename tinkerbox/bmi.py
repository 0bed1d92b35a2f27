"""Body-mass index in metric and imperial units."""

from __future__ import annotations

import argparse


def bmi_metric(weight_kg: float, height_cm: float) -> float:
    """Return the BMI for a weight in kilograms and a height in centimetres."""
    if height_cm <= 0:
        raise ValueError("height must be positive")
    return weight_kg / height_cm / height_cm * 10000


def classify_metric(bmi: float) -> str:
    """Name the weight class of a metric BMI."""
    if bmi < 18.5:
        return "underweight"
    if bmi <= 24.9:
        return "normal"
    if bmi <= 29.9:
        return "overweight"
    return "obese"


def bmi_imperial(weight_lb: float, height_in: float) -> float:
    """Return the BMI for a weight in pounds and a height in inches."""
    if height_in <= 0:
        raise ValueError("height must be positive")
    return weight_lb / (height_in * height_in) * 703


def classify_imperial(bmi: float) -> str:
    """Name the weight class of an imperial BMI."""
    if bmi < 18.5:
        return "underweight"
    if bmi < 24.9:
        return "healthy"
    if bmi < 29.9:
        return "overweight"
    return "obese"


def main(argv=None) -> int:
    """Ask for weight and height and print the BMI and its class."""
    parser = argparse.ArgumentParser(prog="tinkerbox-bmi")
    parser.add_argument("--imperial", action="store_true", help="use pounds and inches")
    args = parser.parse_args(argv)
    try:
        if args.imperial:
            weight = float(input("weight in pounds? "))
            height = float(input("height in inches? "))
            bmi = bmi_imperial(weight, height)
            print(f"bmi: {bmi:.2f}")
            print(f"result: {classify_imperial(bmi)}")
        else:
            weight = float(input("Enter Weight (kg): "))
            height = float(input("Enter Height (cm): "))
            bmi = bmi_metric(weight, height)
            print(f"BMI: {bmi:.2f} {classify_metric(bmi)}")
    except ValueError as error:
        print(f"error: {error}")
        return 1
    return 0