"""
Scalar site index formulas written out with the math module.

Used as independent references for the vectorized models. Each function
takes breast-height age and total top height (m).
"""
import math


def sharma_brunner(age, top_height, b1, b2, b3):
    h = top_height - 1.3
    r = 0.5 * (h - b1 + math.sqrt((h - b1) ** 2 + 4 * b2 * h * age ** (-b3)))
    return (b1 + r) / (1 + (b2 / r * 40 ** (-b3))) + 1.3


def sharma_brunner_spruce(age, top_height):
    return sharma_brunner(age, top_height, 18.9206, 5175.18, 1.1576)


def sharma_brunner_pine(age, top_height):
    return sharma_brunner(age, top_height, 12.8361, 3263.99, 1.1758)


def eriksson_birch(age, top_height):
    h = top_height - 1.3
    b1, b2, k = 394, 1.387, 7
    d1 = b1 / (k ** b2)
    r1 = ((h - d1) ** 2 + 4 * b1 * h / age ** b2) ** 0.5
    return (h + d1 + r1) / (2 + 4 * b1 * 40 ** (-1 * b2) / (h - d1 + r1)) + 1.3


def tveite_spruce_diff(age):
    a = (age - 40) / 10
    return (3.0 + 0.40183 * a - 0.104701 * a ** 2 + 0.679104 * a ** 3 / 100
            + 0.184402 * a ** 4 / 100 - 0.224249 * a ** 5 / 1000)


def tveite_spruce(age, top_height, diff=None):
    h = top_height - 1.3
    if diff is None:
        diff = 3.755 if age > 100 else tveite_spruce_diff(age)
    b = age * 0.1 + 0.55
    h17 = (b / (0.430606 + 0.164818 * b)) ** 2.1
    return 17.0 + 3.0 * ((h - h17) / diff) + 1.3


def braastad_pine_diff(age):
    a = (age - 40) / 10
    return (3.0 + 0.394624 * a - 0.0649695 * a ** 2 + 0.487394 * a ** 3 / 100
            - 0.141827 * a ** 4 / 1000)


def braastad_pine(age, top_height, diff=None):
    h = top_height - 1.3
    if diff is None:
        diff = 3.913 if age > 119 else braastad_pine_diff(age)
    h14 = 1.3 + (24.7 * (1 - math.exp(-0.02105 * age)) ** 1.18029)
    return 14 + 3.0 * ((h - h14) / diff) + 1.3
