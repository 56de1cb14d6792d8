"""Starter question bank used to seed an empty catalog."""

from core.domain.models import QuestionCategory as C, QuestionType as T

QUESTION_BANK = [
    # FRIEND - answered from close friends
    {"content": "Who would you call first with big news?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "telephone"},
    {"content": "Who would you trust with your house keys?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "key"},
    {"content": "Who always remembers your birthday?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "birthday_cake"},
    {"content": "Who gives the most honest advice?", "type": T.FRIEND, "category": C.PERSONALITY, "emoji": "speech_balloon"},
    {"content": "Who would survive longest on a desert island?", "type": T.FRIEND, "category": C.HUMOR, "emoji": "desert_island"},
    {"content": "Who would you set up with your best friend?", "type": T.FRIEND, "category": C.DATING, "emoji": "two_hearts"},
    {"content": "Who makes the best road trip partner?", "type": T.FRIEND, "category": C.ENTERTAINMENT, "emoji": "red_car"},
    {"content": "Who would win a karaoke battle?", "type": T.FRIEND, "category": C.ENTERTAINMENT, "emoji": "microphone"},
    {"content": "Who is secretly the funniest?", "type": T.FRIEND, "category": C.HUMOR, "emoji": "joy"},
    {"content": "Who would you want next to you in a zombie apocalypse?", "type": T.FRIEND, "category": C.OTHER, "emoji": "zombie"},
    {"content": "Who is the calmest in a crisis?", "type": T.FRIEND, "category": C.PERSONALITY, "emoji": "relieved_face"},
    {"content": "Who would plan the perfect surprise party?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "party_popper"},
    {"content": "Who would make the best wedding speech?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "ring"},
    {"content": "Who would you want as a roommate?", "type": T.FRIEND, "category": C.FRIENDSHIP, "emoji": "house"},
    # ACCOMPANY - answered from everyone around you
    {"content": "Who has the best fashion sense?", "type": T.ACCOMPANY, "category": C.APPEARANCE, "emoji": "dress"},
    {"content": "Who has the brightest smile?", "type": T.ACCOMPANY, "category": C.APPEARANCE, "emoji": "smile"},
    {"content": "Who looks like they work out every day?", "type": T.ACCOMPANY, "category": C.FITNESS, "emoji": "flexed_biceps"},
    {"content": "Who could run a marathon tomorrow?", "type": T.ACCOMPANY, "category": C.FITNESS, "emoji": "running"},
    {"content": "Who ships work fast without breaking things?", "type": T.ACCOMPANY, "category": C.WORK, "emoji": "rocket"},
    {"content": "Who would you want on your next project team?", "type": T.ACCOMPANY, "category": C.WORK, "emoji": "handshake"},
    {"content": "Who seems the most reliable under deadlines?", "type": T.ACCOMPANY, "category": C.WORK, "emoji": "alarm_clock"},
    {"content": "Who would you like to get to know better?", "type": T.ACCOMPANY, "category": C.FRIENDSHIP, "emoji": "wave"},
    {"content": "Who probably has the best playlist?", "type": T.ACCOMPANY, "category": C.ENTERTAINMENT, "emoji": "headphone"},
    {"content": "Who gives off main character energy?", "type": T.ACCOMPANY, "category": C.PERSONALITY, "emoji": "star"},
    {"content": "Who would look great in a movie poster?", "type": T.ACCOMPANY, "category": C.APPEARANCE, "emoji": "clapper"},
    {"content": "Who would you ask out for coffee?", "type": T.ACCOMPANY, "category": C.DATING, "emoji": "coffee"},
]
