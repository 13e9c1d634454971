"""Random placeholder entries for seeding an empty list."""

from __future__ import annotations

import random

from .models import Entry, EntryStatus

ANIMALS = (
    "Aardvark", "Albatross", "Alligator", "Alpaca", "Ant", "Anteater", "Antelope",
    "Armadillo", "Badger", "Barracuda", "Bat", "Bear", "Beaver", "Bee", "Bison",
    "Boar", "Buffalo", "Butterfly", "Camel", "Capybara", "Caribou", "Cat",
    "Caterpillar", "Cheetah", "Chicken", "Chimpanzee", "Chinchilla", "Cobra",
    "Cormorant", "Coyote", "Crab", "Crane", "Crocodile", "Crow", "Deer", "Dingo",
    "Dog", "Dolphin", "Donkey", "Dove", "Dragonfly", "Duck", "Eagle", "Eel",
    "Elephant", "Elk", "Emu", "Falcon", "Ferret", "Finch", "Flamingo", "Fox",
    "Frog", "Gazelle", "Gecko", "Giraffe", "Goat", "Goldfish", "Goose", "Gorilla",
    "Grasshopper", "Hamster", "Hare", "Hawk", "Hedgehog", "Heron", "Hippopotamus",
    "Hornet", "Horse", "Hummingbird", "Hyena", "Ibis", "Iguana", "Jackal",
    "Jaguar", "Jellyfish", "Kangaroo", "Kingfisher", "Koala", "Lemur", "Leopard",
    "Lion", "Llama", "Lobster", "Lynx", "Magpie", "Meerkat", "Mole", "Mongoose",
    "Moose", "Mosquito", "Mouse", "Narwhal", "Newt", "Octopus", "Okapi", "Opossum",
    "Ostrich", "Otter", "Owl", "Ox", "Panther", "Parrot", "Peacock", "Pelican",
    "Penguin", "Pheasant", "Pig", "Pigeon", "Porcupine", "Quail", "Rabbit",
    "Raccoon", "Raven", "Reindeer", "Rhinoceros", "Salamander", "Salmon",
    "Scorpion", "Seahorse", "Seal", "Shark", "Sheep", "Skunk", "Sloth", "Snail",
    "Snake", "Sparrow", "Spider", "Squid", "Squirrel", "Starling", "Stingray",
    "Swan", "Tapir", "Tiger", "Toad", "Turkey", "Turtle", "Viper", "Vulture",
    "Walrus", "Wasp", "Weasel", "Whale", "Wolf", "Wombat", "Woodpecker", "Yak",
    "Zebra",
)  # fmt: skip


def random_animal(rng: random.Random | None = None) -> str:
    return (rng or random).choice(ANIMALS)


def generate(count: int, rng: random.Random | None = None) -> list[Entry]:
    """Return *count* new entries named after random animals."""
    return [Entry(description=random_animal(rng), status=EntryStatus.NEW) for _ in range(max(count, 0))]
