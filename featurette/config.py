"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FEATURETTE_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from featurette.core.value_objects import UserConfiguration
from featurette.utils.constants import SPECIAL_FEATURE_FOLDERS

# Trouver le fichier .env à la racine du projet (parent de featurette/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FEATURETTE_.
    Exemple : FEATURETTE_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="FEATURETTE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Bonus : noms de répertoires reconnus (insensible à la casse)
    special_feature_folders: tuple[str, ...] = Field(default=SPECIAL_FEATURE_FOLDERS)

    # Contrôle parental
    block_unrated_movies: bool = Field(default=False)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/featurette.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("special_feature_folders")
    @classmethod
    def check_folders(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Refuse une liste vide de répertoires de bonus."""
        if not v:
            raise ValueError("special_feature_folders ne peut pas etre vide")
        return v

    @property
    def user_configuration(self) -> UserConfiguration:
        """Préférences utilisateur en lecture seule dérivées des paramètres."""
        return UserConfiguration(block_unrated_movies=self.block_unrated_movies)
