"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import numpy as np
import pytest

from dmmclust.algorithms import TokenSet
from dmmclust.utils.text_utils import build_vocabulary, make_documents


# Sample tweets, "preprocessed" for the whitespace tokenizer.
# Four topics: coffee, JavaScript hate, On Error Resume Next, Go/gophers.
TWEETS = [
    # coffee related tweet
    "A Java prefix that I don't hate .",
    "Colleagues must have thought I was crazy on Friday, but @MeccaCoffee ' s latest Xade Burqa is nothing short of orgasm inducing .",
    # JavaScript hate
    "Let me take this time while I wait for your JavaScript to download to tell you to stop using so much JavaScript on your web page .",
    # On Error Resume Next
    "all future programming languages I implement will have On Error Resume Next . Even if it's a functional , expressions-only language . Because I can. ",
    "On Error Resume Next",
    "When I was younger , I used VB. My crutch was On Error Resume Next . I find it weird reimplementing it for a probabilistic parser .",
    # Gophers/Golang
    "Questions for #gopher and #golang people out there : how do you debug a slow compile ? ",
    "In case you missed it , 10000 words on generics in #golang :",
    "Data Science in Go https://speakerdeck.com/chewxy/data-science-in-go … Slides by @chewxy #gopher #golang",
    "Big heap , many pointers . GC killing me . Help ? Tips? #golang . Most pointers unavoidable .",
]


class ArgmaxSampler:
    """Deterministic sampler: always picks the first most likely index."""

    def __init__(self):
        self.calls = 0

    def sample(self, p):
        self.calls += 1
        return int(np.argmax(p))


@pytest.fixture
def tweets():
    return list(TWEETS)


@pytest.fixture
def vocabulary(tweets):
    return build_vocabulary(tweets)


@pytest.fixture
def unique_docs(tweets, vocabulary):
    """Tweets as de-duplicated token sets (Algorithm 3 input)."""
    return make_documents(tweets, vocabulary, allow_repeat=False)


@pytest.fixture
def repeat_docs(tweets, vocabulary):
    """Tweets with repeated tokens kept (Algorithm 4 input)."""
    return make_documents(tweets, vocabulary, allow_repeat=True)


@pytest.fixture
def argmax_sampler():
    return ArgmaxSampler()


@pytest.fixture
def small_docs():
    """Tiny hand-made corpus over a vocabulary of 6 tokens."""
    return [
        TokenSet([0, 1]),
        TokenSet([0, 2]),
        TokenSet([3, 4]),
        TokenSet([4, 5]),
    ]
