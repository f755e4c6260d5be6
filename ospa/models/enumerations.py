from enum import Enum

class NominationType(str, Enum):
    ADVISER = "Outstanding School Paper Adviser"
    JOURNALIST = "Outstanding Campus Journalist"

class Level(str, Enum):
    NATIONAL = "National"
    REGIONAL = "Regional"
    DIVISION = "Division"
    DISTRICT = "District"   # innovations / community entries only
    SCHOOL = "School"

class Rank(str, Enum):
    FIRST = "1st"
    SECOND = "2nd"
    THIRD = "3rd"
    FOURTH = "4th"
    FIFTH = "5th"
    SIXTH = "6th"
    SEVENTH = "7th"

class Position(str, Enum):
    PRESIDENT = "President"
    VICE_PRESIDENT = "Vice President"
    OTHER = "Other positions"

class PublicationPosition(str, Enum):
    EIC = "Editor in Chief"
    ASSOC = "Associate Editor"
    SECTION = "Section Editor"
    WRITER = "Writer/Contributor/Others"

class AcademicRank(str, Enum):
    HIGHEST = "With Highest Honors"
    HIGH = "With High Honors"
    HONORS = "With Honors"
    AVERAGE = "89-85 Average"
    NONE = "None"

class InterviewCriterion(str, Enum):
    PRINCIPLES = "principles"
    LEADERSHIP = "leadership"
    ENGAGEMENT = "engagement"
    COMMITMENT = "commitment"
    COMMUNICATION = "communication"

class Category(str, Enum):
    """List-valued record fields that accept add/remove entry commands."""
    INDIVIDUAL_CONTESTS = "individual_contests"
    GROUP_CONTESTS = "group_contests"
    SPECIAL_AWARDS = "special_awards"
    PUBLICATION_CONTESTS = "publication_contests"
    LEADERSHIP = "leadership"                  # Adviser
    GUILD_LEADERSHIP = "guild_leadership"      # Journalist
    EXTENSION_SERVICES = "extension_services"
    INNOVATIONS = "innovations"
    SPEAKERSHIP = "speakership"
    PUBLISHED_BOOKS = "published_books"
    PUBLISHED_ARTICLES = "published_articles"
    PUBLISHED_WORKS = "published_works"
    TRAININGS_ATTENDED = "trainings_attended"
