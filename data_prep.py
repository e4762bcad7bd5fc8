import logging

import pandas as pd

import config

logger = logging.getLogger(__name__)


def _check_columns(df, required, source):
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{source} is missing required columns: {missing}")


def load_competitions(path=config.DATA_PATH):
    """Read the OpenPowerlifting export. Extra columns are kept, not required."""
    df = pd.read_csv(path, low_memory=False)
    _check_columns(df, config.RAW_COLUMNS, path)
    logger.info("Loaded %d competition rows from %s", len(df), path)
    return df


def load_personal_record(path=config.PERSONAL_PATH):
    """
    Read the single personal record.

    The file holds 7 columns in the order
    Name, Sex, Equipment, Age, BodyweightKg, Best3DeadliftKg, Year.
    Headers are assigned by position. The deadlift may be left blank.
    """
    personal = pd.read_csv(path, dtype=str, keep_default_na=True)
    if personal.shape[1] != len(config.FEATURE_COLUMNS):
        raise ValueError(
            f"{path} must have exactly {len(config.FEATURE_COLUMNS)} columns, "
            f"found {personal.shape[1]}")
    if len(personal) != 1:
        raise ValueError(f"{path} must hold exactly one record, found {len(personal)}")

    personal.columns = config.FEATURE_COLUMNS
    for col in [config.NAME, config.SEX, config.EQUIPMENT]:
        personal[col] = personal[col].str.strip()
    for col in [config.AGE, config.BODYWEIGHT, config.TARGET, config.YEAR]:
        personal[col] = pd.to_numeric(personal[col])
    missing = [c for c in config.PREDICTORS if pd.isna(personal[c].iloc[0])]
    if missing:
        raise ValueError(f"{path} leaves predictor columns blank: {missing}")
    return personal


def add_year(df):
    df = df.copy()
    df[config.YEAR] = df[config.DATE].astype(str).str.extract(r'(\d{4})', expand=False).astype(float)
    return df


def prepare_dataset(raw, year_cutoff=config.YEAR_CUTOFF):
    """
    Derive Year, select the model columns, keep complete cases from
    year_cutoff onwards.

    Returns the filtered frame and a summary dict with row counts per stage
    and the per-column missing counts of the raw selection.
    """
    df = add_year(raw)
    df = df[config.FEATURE_COLUMNS]
    orig_rows = df.shape[0]
    missing_by_column = df.isnull().sum()

    df = df.dropna()
    complete_rows = df.shape[0]

    # negative lifts mark failed attempts in the export
    df = df[df[config.TARGET] > 0]
    positive_rows = df.shape[0]

    df = df[df[config.YEAR] >= year_cutoff].copy()
    df[config.YEAR] = df[config.YEAR].astype(int)
    df = df.reset_index(drop=True)
    logger.info("Filtered %d -> %d rows (Year >= %d)", orig_rows, len(df), year_cutoff)

    summary = {
        'Original': orig_rows,
        'Complete Cases': complete_rows,
        'Positive Deadlift': positive_rows,
        'Year Filter': df.shape[0],
        'missing_by_column': missing_by_column,
        'year_range': (int(df[config.YEAR].min()), int(df[config.YEAR].max())) if len(df) else None,
    }
    return df, summary
