"""Random generation of character names."""

from __future__ import annotations

import enum
import logging
import random
from typing import Sequence

NAME_LENGTH_MAX = 22
MIDDLE_NAME_PROBABILITY = 0.2


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


# The two hundred most frequent names of each kind, grouped by initial.
LAST_NAMES: tuple[str, ...] = _words(
    """
    Adams Alexander Allen Anderson Andrews Armstrong Arnold Austin
    Bailey Baker Barnes Bell Bennett Berry Black Boyd Bradley Brooks Brown Bryant Burns Butler
    Campbell Carpenter Carroll Carter Chavez Clark Cole Coleman Collins Cook Cooper Cox Crawford
    Cruz Cunningham
    Daniels Davis Diaz Dixon Duncan Dunn
    Edwards Elliott Ellis Evans
    Ferguson Fisher Flores Ford Foster Fox Franklin Freeman
    Garcia Gardner Gibson Gomez Gonzales Gonzalez Gordon Graham Grant Gray Green Greene Griffin
    Hall Hamilton Harper Harris Harrison Hart Hawkins Hayes Henderson Henry Hernandez Hicks Hill
    Holmes Howard Hudson Hughes Hunt Hunter
    Jackson James Jenkins Johnson Jones Jordan
    Kelley Kelly Kennedy King Knight
    Lane Lawrence Lawson Lee Lewis Long Lopez
    Marshall Martin Martinez Mason Matthews Mcdonald Miller Mills Mitchell Moore Morales Morgan
    Morris Murphy Murray Myers
    Nelson Nichols
    Olson Ortiz Owens
    Palmer Parker Patterson Payne Perez Perkins Perry Peters Peterson Phillips Pierce Porter
    Powell Price
    Ramirez Ramos Ray Reed Reyes Reynolds Rice Richardson Riley Rivera Roberts Robertson Robinson
    Rodriguez Rogers Rose Ross Ruiz Russell
    Sanchez Sanders Scott Shaw Simmons Simpson Sims Smith Snyder Spencer Stephens Stevens Stewart
    Stone Sullivan
    Taylor Thomas Thompson Torres Tucker Turner
    Wagner Walker Wallace Ward Warren Washington Watkins Watson Weaver Webb Wells West White
    Williams Willis Wilson Wood Woods Wright
    Young
    """
)

FEMALE_NAMES: tuple[str, ...] = _words(
    """
    Alice Alicia Alma Amanda Amber Amy Ana Andrea Angela Anita Ann Anna Anne Annette Annie April
    Ashley Audrey
    Barbara Beatrice Bernice Bertha Beth Betty Beverly Bonnie Brenda Brittany
    Carmen Carol Carolyn Carrie Catherine Cathy Charlotte Cheryl Christina Christine Cindy Clara
    Connie Crystal Cynthia
    Dana Danielle Darlene Dawn Debbie Deborah Debra Denise Diana Diane Dolores Donna Doris Dorothy
    Edith Edna Elaine Eleanor Elizabeth Ellen Elsie Emily Emma Erica Erin Esther Ethel Eva Evelyn
    Florence Frances
    Gail Geraldine Gladys Gloria Grace
    Hazel Heather Helen Holly
    Ida Irene
    Jacqueline Jamie Jane Janet Janice Jean Jeanette Jeanne Jennifer Jessica Jill Joan Joann
    Joanne Josephine Joyce Juanita Judith Judy Julia Julie June
    Karen Katherine Kathleen Kathryn Kathy Katie Kelly Kim Kimberly Kristen
    Laura Lauren Laurie Leslie Lillian Linda Lisa Lois Loretta Lori Lorraine Louise Lucille Lynn
    Margaret Maria Marie Marilyn Marion Marjorie Martha Mary Megan Melanie Melissa Michele
    Michelle Mildred Monica
    Nancy Nicole Norma
    Pamela Patricia Paula Pauline Peggy Phyllis
    Rachel Rebecca Regina Renee Rhonda Rita Roberta Robin Rosa Rose Ruby Ruth
    Sally Samantha Sandra Sara Sarah Shannon Sharon Sheila Sherry Shirley Stacy Stephanie Sue
    Susan Suzanne Sylvia
    Tammy Teresa Thelma Theresa Tiffany Tina Tracy
    Valerie Vanessa Veronica Victoria Virginia Vivian
    Wanda Wendy
    Yolanda Yvonne
    """
)

MALE_NAMES: tuple[str, ...] = _words(
    """
    Aaron Adam Alan Albert Alex Alexander Alfred Allen Alvin Andrew Anthony Antonio Arthur
    Barry Benjamin Bernard Bill Billy Bobby Bradley Brandon Brent Brian Bruce Bryan
    Calvin Carl Carlos Chad Charles Charlie Chris Christopher Clarence Clifford Clyde Corey Craig
    Curtis
    Dale Dan Daniel Danny Darrell David Dean Dennis Derek Derrick Don Donald Douglas Dustin
    Earl Eddie Edward Edwin Eric Ernest Eugene
    Floyd Francis Francisco Frank Fred Frederick
    Gary Gene George Gerald Gilbert Glen Glenn Gordon Greg Gregory
    Harold Harry Hector Henry Herbert Herman Howard
    Jack Jacob James Jason Jay Jeff Jeffery Jeffrey Jeremy Jerome Jerry Jesse Jesus Jim Jimmy Joe
    Joel John Johnny Jon Jonathan Jorge Jose Joseph Joshua Juan Justin
    Keith Kenneth Kevin Kyle
    Larry Lawrence Lee Leo Leon Leonard Leroy Lester Lewis Lloyd Louis Luis
    Manuel Marcus Mario Mark Martin Marvin Matthew Maurice Melvin Michael Micheal Miguel Mike
    Nathan Nicholas Norman
    Oscar
    Patrick Paul Pedro Peter Philip Phillip
    Ralph Ramon Randall Randy Ray Raymond Ricardo Richard Rick Ricky Robert Roberto Rodney Roger
    Ronald Ronnie Roy Russell Ryan
    Sam Samuel Scott Sean Shane Shawn Stanley Stephen Steve Steven
    Terry Theodore Thomas Tim Timothy Todd Tom Tommy Tony Travis Troy Tyler
    Vernon Victor Vincent
    Walter Warren Wayne Wesley William Willie
    Zachary
    """
)

logger = logging.getLogger(__name__)


class NameType(enum.Enum):
    MALE_NAME = enum.auto()
    FEMALE_NAME = enum.auto()
    SURNAME = enum.auto()


_LISTS: dict[NameType, Sequence[str]] = {
    NameType.MALE_NAME: MALE_NAMES,
    NameType.FEMALE_NAME: FEMALE_NAMES,
    NameType.SURNAME: LAST_NAMES,
}


def _white_name(rng: random.Random, first_names: Sequence[str], last_name: str) -> str:
    while True:
        parts = [rng.choice(first_names)]

        if rng.random() < MIDDLE_NAME_PROBABILITY:
            parts.append(chr(rng.randint(ord("A"), ord("Z"))) + ".")

        parts.append(last_name if last_name else rng.choice(LAST_NAMES))
        name = " ".join(parts)

        if name and len(name) <= NAME_LENGTH_MAX:
            return name


def generate_random_white_last_name(rng: random.Random) -> str:
    return rng.choice(LAST_NAMES)


def generate_random_white_male_name(rng: random.Random, last_name: str = "") -> str:
    """Full male name; a random surname is drawn when ``last_name`` is empty."""
    return _white_name(rng, MALE_NAMES, last_name)


def generate_random_white_female_name(rng: random.Random, last_name: str = "") -> str:
    """Full female name; a random surname is drawn when ``last_name`` is empty."""
    return _white_name(rng, FEMALE_NAMES, last_name)


def generate_random_white_non_binary_name(rng: random.Random, last_name: str = "") -> str:
    """Full name drawn from the male or female list with even odds."""
    if rng.random() < 0.5:
        return generate_random_white_male_name(rng, last_name)
    return generate_random_white_female_name(rng, last_name)


def compute_max_length(name_type: NameType) -> int:
    """Length of the longest name of the given kind."""
    return max(len(name) for name in _LISTS[name_type])


def main(argv: Sequence[str] | None = None) -> int:
    """Print one random female and one random male name."""
    logger.debug(
        "male: %d, female: %d, surname: %d",
        compute_max_length(NameType.MALE_NAME),
        compute_max_length(NameType.FEMALE_NAME),
        compute_max_length(NameType.SURNAME),
    )
    rng = random.Random()
    print(f"Female name: {generate_random_white_female_name(rng)}")
    print(f"Male name: {generate_random_white_male_name(rng)}")
    return 0