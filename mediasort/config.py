"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis un fichier YAML (par défaut /etc/media-sort.yaml)
et peut être surchargée par des variables d'environnement avec le préfixe MEDIASORT_
(MEDIASORT_OVERWRITE=true, MEDIASORT_PERMISSIONS__MODE=0640...).

Exemple de fichier :

    dir_watch: /srv/downloads
    show_path: /srv/media/shows
    movie_path: /srv/media/movies
    permissions:
      mode: 0644
      user: media
      group: media
    omdb:
      apikey: abcdef12
    overwrite: false
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mediasort.core.exceptions import ConfigError


class PermissionSettings(BaseModel):
    """Permissions appliquées aux fichiers placés et à leurs répertoires parents.

    Le mode accepte un entier ou une chaîne octale ("0644", "0o644").
    user/group à None laissent le propriétaire inchangé.
    """

    mode: int = Field(default=0o644)
    user: Optional[str] = Field(default=None)
    group: Optional[str] = Field(default=None)

    @field_validator("mode", mode="before")
    @classmethod
    def parse_octal(cls, v: Any) -> Any:
        """Interprète les chaînes comme des modes octaux."""
        if isinstance(v, str):
            return int(v.strip(), 8)
        return v

    @field_validator("mode")
    @classmethod
    def check_range(cls, v: int) -> int:
        if not 0 <= v <= 0o7777:
            raise ValueError(f"mode hors limites: {oct(v)}")
        return v


class OmdbSettings(BaseModel):
    """Identifiants de l'API OMDb (recherche des films)."""

    apikey: Optional[str] = Field(default=None)


class Settings(BaseSettings):
    """Paramètres de l'application.

    Les variables d'environnement (préfixe MEDIASORT_) ont priorité
    sur les valeurs du fichier YAML.

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIASORT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~)
    dir_watch: Path
    show_path: Path
    movie_path: Path

    permissions: PermissionSettings = Field(default_factory=PermissionSettings)
    omdb: OmdbSettings = Field(default_factory=OmdbSettings)
    overwrite: bool = Field(default=False)

    # Fournisseurs : pas de timeout par defaut, un fournisseur muet bloque le traitement
    api_timeout: Optional[float] = Field(default=None, gt=0)

    # Surveillance : taille du canal entre le thread watchdog et la boucle
    watch_queue_size: int = Field(default=128, ge=1)

    # Logging (stderr + fichier JSON optionnel avec rotation)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("dir_watch", "show_path", "movie_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # L'environnement surcharge les valeurs du fichier YAML (passees a l'init)
        return env_settings, init_settings, file_secret_settings

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb.apikey)


def load_settings(config_path: Path) -> Settings:
    """
    Charge la configuration depuis un fichier YAML.

    Args:
        config_path: Chemin du fichier de configuration

    Returns:
        Settings validés

    Raises:
        ConfigError: Fichier absent, YAML invalide ou valeurs invalides
    """
    config_path = Path(config_path).expanduser()
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Impossible d'ouvrir {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML invalide dans {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: la configuration doit etre un dictionnaire")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration invalide dans {config_path}: {e}") from e
