from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WordSimConfiguration(BaseSettings):
    """
    Flags consulted while scoring. Values are read from ``WORDSIM_*``
    environment variables (or a ``.env`` file) unless given explicitly,
    and are frozen once built: pass one instance to the database and the
    calculators instead of mutating shared state.
    """

    trace: bool = Field(False, description="Accumulate a human readable explanation in every Relatedness.")
    cache: bool = Field(True, description="Cache normalised glosses per (concept, link).")
    stem: bool = Field(False, description="Stem every gloss token.")
    memory_db: bool = Field(False, description="Read the whole dictionary into memory when it is opened.")
    mfs: bool = Field(False, description="Only score the most frequent sense of each word.")

    model_config = SettingsConfigDict(env_prefix='WORDSIM_', env_file='.env',
                                      env_file_encoding='utf-8', extra='ignore',
                                      frozen=True)
