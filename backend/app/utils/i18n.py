"""Static EN/FR translations for the public site and the language lookup helpers."""

from typing import Any, Dict

from app.utils.helpers import SUPPORTED_LANGUAGES

DEFAULT_LANGUAGE = "fr"

TRANSLATIONS: Dict[str, Dict[str, Any]] = {
    "en": {
        "nav": {
            "home": "HOME",
            "ourProgram": "OUR PROGRAM",
            "ourMeets": "OUR MEETS",
            "tryouts": "TRYOUTS",
            "clubRecords": "CLUB RECORDS",
            "coaches": "COACHES",
            "news": "NEWS",
            "gallery": "GALLERY",
            "contact": "CONTACT US",
        },
        "topBar": {
            "phone": "450-466-6563",
            "email": "info@natation-samak.org",
            "member": "Member",
        },
        "hero": {
            "joinTeam": "Join the Team",
        },
        "mission": {
            "welcome": "WELCOME TO THE DORVAL SWIM CLUB",
            "description": (
                "We are a competitive swim club that trains out of the Dorval Aquatic and Sports Complex "
                "on the edge of the south shore on Montreal's West Island. Our vision is to create an "
                "environment where the youth of Dorval have the opportunity to strive for excellence in the "
                "sport of swimming. By building a program that promotes training excellence, sportsmanship, "
                "character and self-confidence, the athletes of the Dorval Swim Club will have the opportunity "
                "to reach their potential and compete at the highest level. Together, with the city of Dorval, "
                "the Dorval Swim Club aspires to provide the resources and knowledge needed to achieve this mandate."
            ),
            "missionTitle": "OUR MISSION STATEMENT",
            "mission1": (
                "To provide the highest level of professional coaching to prepare our athletes to compete "
                "successfully at the highest levels;"
            ),
            "mission2": (
                "To create an atmosphere that inspires our athletes to strive for the best in training, "
                "competition, and life, through the development of work ethic, confidence, self-motivation, "
                "and self-worth;"
            ),
            "mission3": (
                "To develop team pride and unity where every athlete becomes each other's motivator and "
                "each other's most dedicated fan;"
            ),
            "mission4": (
                "To instill a love for the sport of swimming by relishing the challenges sought and conquered, "
                "at all levels of the sport;"
            ),
            "mission5": (
                "To ensure, as much as we can, that all our athletes, coaches, and volunteers are treated with "
                "respect, and that we foster an environment where no one feels left out;"
            ),
            "mission6": "To be an active participant within the City of Dorval community.",
            "coachesTitle": "OUR COACHES",
            "coaches1": "Led by Head Coach Marc Daoust, our staff is committed to our Vision and Mission statements.",
            "coaches2": "With a focus on teaching the technical aspects of swimming, as a team,",
            "coaches3": "We are motivated to get our swimmers to be the best they can be at maturity.",
        },
        "news": {
            "title": "New Platform",
            "date": "June 03 2021",
            "readMore": "read more",
            "viewAll": "View All News",
        },
        "partners": {
            "title": "OUR PARTNERS",
        },
        "footer": {
            "address": "Address",
            "complex": "Dorval Aquatic & Sports Complex",
            "street": "1295 Dawson Avenue",
            "city": "Dorval, Quebec H9S 1Y3",
            "contact": "Contact",
            "phone": "514-633-4209",
            "email": "info@swimdorval.ca",
            "socialize": "SOCIALIZE",
            "twitter": "@swimdorval",
            "facebook": "swimdorval",
            "instagram": "swimdorval",
            "youtube": "swimdorval",
            "sponsors": "SPONSORS",
            "copyright": "Copyright © 2025",
            "clubName": "Dorval Swim Club | All rights reserved.",
        },
    },
    "fr": {
        "nav": {
            "home": "ACCUEIL",
            "ourProgram": "NOTRE PROGRAMME",
            "ourMeets": "NOS RENCONTRES",
            "tryouts": "ESSAIS",
            "clubRecords": "RECORDS DU CLUB",
            "coaches": "ENTRAÎNEURS",
            "news": "NOUVELLES",
            "gallery": "GALERIE",
            "contact": "NOUS CONTACTER",
        },
        "topBar": {
            "phone": "450-466-6563",
            "email": "info@natation-samak.org",
            "member": "Membre",
        },
        "hero": {
            "joinTeam": "Joindre L'Équipe",
        },
        "mission": {
            "welcome": "BIENVENUE AU CLUB DE NATATION DORVAL",
            "description": (
                "Nous sommes un club de natation compétitif qui s'entraîne au Complexe aquatique et sportif "
                "de Dorval, situé sur la rive sud de l'île de Montréal. Notre vision est de créer un environnement "
                "où les jeunes de Dorval ont l'opportunité de viser l'excellence dans le sport de la natation. "
                "En construisant un programme qui favorise l'excellence en entraînement, le fair-play, le caractère "
                "et la confiance en soi, les athlètes du Club de natation Dorval auront l'opportunité d'atteindre "
                "leur potentiel et de compétitionner au plus haut niveau. Ensemble, avec la ville de Dorval, le Club "
                "de natation Dorval aspire à fournir les ressources et les connaissances nécessaires pour atteindre "
                "ce mandat."
            ),
            "missionTitle": "NOTRE ÉNONCÉ DE MISSION",
            "mission1": (
                "Fournir le plus haut niveau d'entraînement professionnel pour préparer nos athlètes à "
                "compétitionner avec succès aux plus hauts niveaux;"
            ),
            "mission2": (
                "Créer une atmosphère qui inspire nos athlètes à viser le meilleur en entraînement, en compétition "
                "et dans la vie, grâce au développement de l'éthique de travail, de la confiance, de "
                "l'auto-motivation et de l'estime de soi;"
            ),
            "mission3": (
                "Développer la fierté et l'unité d'équipe où chaque athlète devient le motivateur et le fan "
                "le plus dévoué de l'autre;"
            ),
            "mission4": (
                "Instiller un amour pour le sport de la natation en savourant les défis recherchés et conquis, "
                "à tous les niveaux du sport;"
            ),
            "mission5": (
                "Assurer, autant que possible, que tous nos athlètes, entraîneurs et bénévoles sont traités avec "
                "respect, et que nous favorisons un environnement où personne ne se sent exclu;"
            ),
            "mission6": "Être un participant actif au sein de la communauté de la ville de Dorval.",
            "coachesTitle": "NOS ENTRAÎNEURS",
            "coaches1": (
                "Dirigés par l'entraîneur-chef Marc Daoust, notre personnel est engagé envers nos énoncés "
                "de Vision et de Mission."
            ),
            "coaches2": "Avec un accent sur l'enseignement des aspects techniques de la natation, en équipe,",
            "coaches3": "Nous sommes motivés à amener nos nageurs à être les meilleurs qu'ils peuvent être à maturité.",
        },
        "news": {
            "title": "Nouvelle plateforme",
            "date": "juin 03 2021",
            "readMore": "lire la suite",
            "viewAll": "Voir toutes les nouvelles",
        },
        "partners": {
            "title": "NOS PARTENAIRES",
        },
        "footer": {
            "address": "Adresse",
            "complex": "Complexe aquatique et sportif de Dorval",
            "street": "1295, avenue Dawson",
            "city": "Dorval, Québec H9S 1Y3",
            "contact": "Contact",
            "phone": "514-633-4209",
            "email": "info@swimdorval.ca",
            "socialize": "RÉSEAUX SOCIAUX",
            "twitter": "@swimdorval",
            "facebook": "swimdorval",
            "instagram": "swimdorval",
            "youtube": "swimdorval",
            "sponsors": "COMMANDITAIRES",
            "copyright": "Droits d'auteur © 2025",
            "clubName": "Club de natation Dorval | Tous droits réservés.",
        },
    },
}


def is_supported(lang: str | None) -> bool:
    return lang in SUPPORTED_LANGUAGES


def get_language(pathname: str | None) -> str:
    """First path segment when it names a supported language, otherwise French."""
    segments = (pathname or "").split("/")
    lang = segments[1] if len(segments) > 1 else ""
    return lang if is_supported(lang) else DEFAULT_LANGUAGE


def t(lang: str, key: str) -> str:
    value: Any = TRANSLATIONS.get(lang)
    for part in key.split("."):
        if not isinstance(value, dict):
            return key
        value = value.get(part)
    return value if isinstance(value, str) else key


def translations_for(lang: str) -> Dict[str, Any]:
    return TRANSLATIONS[lang if is_supported(lang) else DEFAULT_LANGUAGE]
