from __future__ import annotations

from ..models.quote import Quote

QUOTES: tuple[Quote, ...] = (
    Quote(text="You look like someone who knows where their towel is"),
    Quote(text="Some people can be Aragorn. Everyone can be Samwise."),
    Quote(text="Up, up, down down, left right, left right, B A Start."),
    Quote(text="Up, up and away!"),
    Quote(text="It's dangerous to go alone! Take this."),
    Quote(text="Happiness is a direction, not a place"),
    Quote(text="May the Force be with you"),
    Quote(text="Live long and prosper"),
    Quote(text="Every day, someone is the happiest person in the world."),
    Quote(text="It makes me very happy that you took the time to read this. Thank you."),
    Quote(text="The better you get at something, the smaller details you worry about"),
    Quote(text="First step towards excellence is to be really, horribly bad at something"),
    Quote(text="Do not mistake motion for action"),
    Quote(text="The journey of a thousand miles begins with one step.", author="Lao Tzu"),
    Quote(text="Do not mistake kindness for weakness"),
    Quote(text="In the middle of difficulty lies opportunity.", author="Albert Einstein"),
    Quote(
        text="It is during our darkest moments that we must focus to see the light.",
        author="Aristotle",
    ),
    Quote(text="Be the change you wish to see in the world.", author="Mahatma Gandhi"),
    Quote(
        text="Happiness is not something ready made. It comes from your own actions.",
        author="Dalai Lama",
    ),
    Quote(
        text="The best time to plant a tree was 20 years ago. The second best time is now.",
        author="Chinese Proverb",
    ),
    Quote(text="Every accomplishment starts with the decision to try.", author="John F. Kennedy"),
    Quote(text="You learn more from failure than from success."),
    Quote(
        text=(
            "Believe in yourself. You are braver than you believe, stronger than you seem, "
            "and smarter than you think."
        ),
        author="A.A. Milne",
    ),
    Quote(text="Great things never came from comfort zones."),
    Quote(
        text="You are never too old to set another goal or to dream a new dream.",
        author="C.S. Lewis",
    ),
    Quote(text="Great success is built on great failure."),
    Quote(text="Don't stop when you are tired. Stop when you are done."),
    Quote(
        text="Do something today that your future self will thank you for.",
        author="Sean Patrick Flanery",
    ),
    Quote(
        text="The only person you should try to be better than is the person you were yesterday."
    ),
    Quote(text="No act of kindness, no matter how small, is ever wasted.", author="Aesop"),
    Quote(text="The world is full of kind people. If you can't find one, be one."),
)
