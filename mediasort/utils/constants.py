"""
Constantes globales pour media-sort.

Ce module contient les constantes utilisees dans l'application:
- Extensions media reconnues
- Marqueurs de release (resolution, source, codec) coupant le titre
- Bornes de l'annee plausible
- Emplacement par defaut du fichier de configuration
"""

from pathlib import Path

# Extensions media reconnues (sans le point, en minuscules)
MEDIA_EXTENSIONS = frozenset({
    "mkv",
    "avi",
    "mp4",
    "m4v",
    "mov",
    "wmv",
    "mpg",
    "mpeg",
    "webm",
    # Sous-titres
    "srt",
    "sub",
    "ass",
    "idx",
})

# Marqueurs de release : tout ce qui suit le premier marqueur est retire du titre
RELEASE_TAGS = (
    # Resolutions
    "480p",
    "576p",
    "720p",
    "1080p",
    "1440p",
    "2160p",
    # Sources
    "hdtv",
    "web",
    "webrip",
    "webdl",
    "bluray",
    "bdrip",
    "brrip",
    "dvdrip",
    "hdrip",
    "remux",
    "imax",
    # Codecs video
    "x264",
    "x265",
    "h264",
    "h265",
    "hevc",
    "xvid",
    "divx",
    "10bit",
    # Audio
    "aac",
    "ac3",
    "dts",
    "atmos",
    "ddp5",
)

# Premier film connu : "The Horse in Motion" (1878)
FIRST_MOVIE_YEAR = 1878

# Titre des episodes speciaux sans titre exploitable
UNKNOWN_SPECIAL_TITLE = "Unknown Special"

# Bit d'execution ajoute aux repertoires lors de la propagation des permissions
DIRECTORY_EXEC_BITS = 0o111

DEFAULT_CONFIG_PATH = Path("/etc/media-sort.yaml")
