"""
Seed datasets.

`TEST_DATA` is small and stable: the integration tests depend on its shape
(article 1 has comments, article 2 has none, user `lurker` exists).
Articles are inserted in list order, so their ids are 1-based list positions
and comments refer to them by that id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

PLACEHOLDER_AVATAR = "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png"
PLACEHOLDER_IMAGE = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"


@dataclass(frozen=True)
class Dataset:
    topics: list[dict[str, Any]] = field(default_factory=list)
    users: list[dict[str, Any]] = field(default_factory=list)
    articles: list[dict[str, Any]] = field(default_factory=list)
    comments: list[dict[str, Any]] = field(default_factory=list)


def _article(title: str, topic: str, author: str, body: str, created_at: datetime, votes: int = 0) -> dict[str, Any]:
    return {
        "title": title,
        "topic": topic,
        "author": author,
        "body": body,
        "created_at": created_at,
        "votes": votes,
        "article_img_url": PLACEHOLDER_IMAGE,
    }


def _comment(article_id: int, author: str, body: str, created_at: datetime, votes: int = 0) -> dict[str, Any]:
    return {
        "article_id": article_id,
        "author": author,
        "body": body,
        "created_at": created_at,
        "votes": votes,
    }


TEST_DATA = Dataset(
    topics=[
        {"slug": "mitch", "description": "The man, the Mitch, the legend"},
        {"slug": "cats", "description": "Not dogs"},
        {"slug": "paper", "description": "what books are made of"},
    ],
    users=[
        {"username": "butter_bridge", "name": "jonny", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "icellusedkars", "name": "sam", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "rogersop", "name": "paul", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "lurker", "name": "do_nothing", "avatar_url": PLACEHOLDER_AVATAR},
    ],
    articles=[
        _article("Living in the shadow of a great man", "mitch", "butter_bridge",
                 "I find this existence challenging", datetime(2020, 7, 9, 20, 11), votes=100),
        _article("Sony Vaio; or, The Laptop", "mitch", "icellusedkars",
                 "Call me Mitchell. Some years ago I thought I would buy a laptop.", datetime(2020, 10, 16, 5, 3)),
        _article("Eight pug gifs that remind me of mitch", "mitch", "icellusedkars",
                 "some gifs", datetime(2020, 11, 3, 9, 12)),
        _article("Student SUES Mitch!", "mitch", "rogersop",
                 "We all love Mitch and his wonderful, unique typing style.", datetime(2020, 5, 6, 1, 14)),
        _article("UNCOVERED: catspiracy to bring down democracy", "cats", "rogersop",
                 "Bastet walks amongst us, and the cats are taking arms!", datetime(2020, 8, 3, 13, 14)),
        _article("A", "mitch", "icellusedkars", "Delicious tin of cat food", datetime(2020, 10, 18, 1, 0)),
        _article("Z", "mitch", "icellusedkars", "I was hungry.", datetime(2020, 1, 7, 14, 8)),
        _article("Does Mitch predate civilisation?", "mitch", "icellusedkars",
                 "Archaeologists have uncovered a gigantic statue from the dawn of humanity.",
                 datetime(2020, 4, 17, 1, 8)),
        _article("They're not exactly dogs, are they?", "mitch", "butter_bridge",
                 "Well? Think about it.", datetime(2020, 6, 6, 9, 10)),
        _article("Seven inspirational thought leaders from Manchester UK", "mitch", "rogersop",
                 "Who are we kidding, there is only one, and it's Mitch!", datetime(2020, 5, 14, 4, 15)),
        _article("Am I a cat?", "mitch", "icellusedkars",
                 "Having run out of ideas for articles, I am staring at the wall blankly.",
                 datetime(2020, 1, 15, 22, 21)),
        _article("Moustache", "mitch", "butter_bridge", "Have you seen the size of that thing?",
                 datetime(2020, 10, 11, 11, 24)),
        _article("Another article about Mitch", "mitch", "butter_bridge",
                 "There will never be enough articles about Mitch!", datetime(2020, 10, 11, 11, 24)),
    ],
    comments=[
        _comment(9, "butter_bridge", "Oh, I've got compassion running out of my nose, pal!",
                 datetime(2020, 4, 6, 12, 17), votes=16),
        _comment(1, "butter_bridge", "The beautiful thing about treasure is that it exists.",
                 datetime(2020, 10, 31, 3, 3), votes=14),
        _comment(1, "icellusedkars", "Replacing the quiet elegance of the dark suit and tie.",
                 datetime(2020, 3, 1, 1, 13), votes=100),
        _comment(1, "icellusedkars", " I carry a log, yes. Is it funny to you? It is not to me.",
                 datetime(2020, 2, 23, 12, 1)),
        _comment(1, "icellusedkars", "I hate streaming noses", datetime(2020, 11, 3, 21, 0)),
        _comment(1, "icellusedkars", "I hate streaming eyes even more", datetime(2020, 4, 11, 21, 2)),
        _comment(1, "icellusedkars", "Lobster pot", datetime(2020, 5, 15, 20, 19)),
        _comment(1, "icellusedkars", "Delicious crackerbreads", datetime(2020, 4, 14, 20, 19)),
        _comment(1, "icellusedkars", "Superficially charming", datetime(2020, 1, 1, 3, 8)),
        _comment(3, "icellusedkars", "git push origin master", datetime(2020, 6, 20, 7, 24)),
        _comment(3, "icellusedkars", "Ambidextrous marsupial", datetime(2020, 9, 19, 23, 10)),
        _comment(1, "icellusedkars", "Fruit pastilles", datetime(2020, 6, 15, 10, 25)),
        _comment(1, "icellusedkars", "What do you see? I have no idea where this will lead us.",
                 datetime(2020, 6, 9, 5, 0), votes=3),
        _comment(5, "icellusedkars", "I am 100% sure that we're not completely sure.",
                 datetime(2020, 11, 3, 21, 0), votes=1),
        _comment(5, "butter_bridge", "I hate streaming noses", datetime(2020, 11, 3, 21, 0)),
        _comment(1, "butter_bridge", "This morning, I showered for nine minutes.",
                 datetime(2020, 7, 21, 0, 20), votes=16),
        _comment(9, "icellusedkars", "The owls are not what they seem.", datetime(2020, 3, 14, 17, 2), votes=20),
        _comment(6, "butter_bridge", "This is a bad article name", datetime(2020, 4, 6, 12, 17), votes=1),
    ],
)


DEVELOPMENT_DATA = Dataset(
    topics=[
        {"slug": "coding", "description": "Code is love, code is life"},
        {"slug": "football", "description": "FOOTIE!"},
        {"slug": "cooking", "description": "Hey good looking, what you got cooking?"},
    ],
    users=[
        {"username": "tickle122", "name": "Tom Tickle", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "grumpy19", "name": "Paul Grump", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "happyamy2016", "name": "Amy Happy", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "cooljmessy", "name": "Peter Messy", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "weegembump", "name": "Gemma Bump", "avatar_url": PLACEHOLDER_AVATAR},
        {"username": "jessjelly", "name": "Jess Jelly", "avatar_url": PLACEHOLDER_AVATAR},
    ],
    articles=[
        _article("Running a Node App", "coding", "jessjelly",
                 "This is part two of a series on how to get up and running with Systemd and Node.js.",
                 datetime(2020, 11, 7, 6, 3)),
        _article("The Rise Of Thinking Machines: How IBM's Watson Takes On The World", "coding", "jessjelly",
                 "Many people know Watson as the IBM-developed cognitive super computer.",
                 datetime(2020, 5, 14, 0, 2)),
        _article("22 Amazing open source React projects", "coding", "happyamy2016",
                 "This is a collection of open source apps built with React.", datetime(2020, 2, 29, 11, 12)),
        _article("Making sense of Redux", "coding", "jessjelly",
                 "When I first started learning React, I remember reading lots of articles about the different technologies associated with it.",
                 datetime(2020, 9, 11, 21, 2), votes=4),
        _article("Please stop worrying about Angular 3", "coding", "jessjelly",
                 "Another Angular version planned already?", datetime(2020, 4, 21, 17, 6)),
        _article("Who are the most followed clubs and players on Instagram?", "football", "jessjelly",
                 "Manchester United are the most popular club on Instagram.", datetime(2020, 9, 13, 12, 2)),
        _article("History of Football", "football", "grumpy19",
                 "It may come as a surprise to many, but football has a long and interesting history.",
                 datetime(2020, 6, 13, 10, 34), votes=2),
        _article("High Altitude Cooking", "cooking", "happyamy2016",
                 "Most backpacking trails vary only a few thousand feet elevation.",
                 datetime(2020, 1, 4, 0, 24)),
        _article("Twice-Baked Butternut Squash Is the Thanksgiving Side Dish of Your Dreams", "cooking",
                 "tickle122", "What if, for once, your Thanksgiving sides were just as dazzling as the centerpiece turkey?",
                 datetime(2020, 5, 28, 19, 11), votes=1),
        _article("What does Jose Mourinho's handwriting say about his personality?", "football", "weegembump",
                 "Jose Mourinho was at The O2 on Sunday night to watch Dominic Thiem in action.",
                 datetime(2020, 4, 21, 19, 3)),
    ],
    comments=[
        _comment(1, "tickle122", "Itaque quisquam est similique et est perspiciatis reprehenderit voluptatem autem.",
                 datetime(2020, 11, 7, 17, 5), votes=3),
        _comment(1, "grumpy19", "Nobis consequatur animi. Ullam nobis quaerat voluptates veniam.",
                 datetime(2020, 11, 11, 9, 5), votes=7),
        _comment(3, "cooljmessy", "Qui sunt sit voluptas repellendus sed.", datetime(2020, 3, 2, 8, 15), votes=11),
        _comment(4, "weegembump", "Corporis magnam placeat quia nulla illum nisi.", datetime(2020, 9, 12, 7, 9)),
        _comment(7, "happyamy2016", "Vel quae laboriosam optio ut.", datetime(2020, 6, 14, 11, 41), votes=2),
        _comment(9, "jessjelly", "Est pariatur quis ipsa culpa unde temporibus et.", datetime(2020, 6, 2, 1, 20)),
        _comment(10, "grumpy19", "Reiciendis enim soluta a sed cumque dolor quia quod.",
                 datetime(2020, 4, 22, 8, 7), votes=4),
        _comment(10, "tickle122", "Ab nostrum ullam est ipsa.", datetime(2020, 4, 25, 18, 40)),
    ],
)

DATASETS: dict[str, Dataset] = {
    "test": TEST_DATA,
    "development": DEVELOPMENT_DATA,
}
