import numpy as np
import pandas as pd
from scipy.stats import f_oneway, pearsonr

import config


def describe_dataset(df):
    """Summary stats for continuous columns, level counts and target stats per category."""
    continuous = df[config.CORRELATION_COLUMNS].describe()
    level_counts = {col: df[col].value_counts() for col in config.CATEGORICAL}
    target_by_level = {
        col: df.groupby(col)[config.TARGET].agg(['count', 'mean', 'std']).round(2)
        for col in config.CATEGORICAL
    }
    return {'continuous': continuous, 'level_counts': level_counts, 'target_by_level': target_by_level}


def correlation_matrix(df, columns=None):
    # pandas drops missing values pairwise
    columns = columns or config.CORRELATION_COLUMNS
    return df[columns].corr(method='pearson')


def target_correlations(df):
    rows = []
    for col in config.CORRELATION_COLUMNS:
        if col == config.TARGET:
            continue
        pair = df[[col, config.TARGET]].dropna()
        r, p = pearsonr(pair[col], pair[config.TARGET])
        rows.append({'Feature': col, 'r': r, 'p': p})
    return pd.DataFrame(rows).set_index('Feature')


def anova_by_category(df, categories=None):
    """
    One-way ANOVA of the target across the levels of each categorical feature.
    Features with fewer than two levels get NaN statistics.
    """
    categories = categories or config.CATEGORICAL
    rows = []
    for col in categories:
        groups = [g[config.TARGET].values for _, g in df.groupby(col)]
        n_levels = len(groups)
        df_between = n_levels - 1
        df_within = sum(len(g) for g in groups) - n_levels
        if n_levels < 2 or df_within < 1:
            f_stat, p_value = np.nan, np.nan
        else:
            f_stat, p_value = f_oneway(*groups)
        rows.append({
            'Feature': col,
            'Levels': n_levels,
            'df_between': df_between,
            'df_within': df_within,
            'F': f_stat,
            'p': p_value,
        })
    return pd.DataFrame(rows).set_index('Feature')


def print_report(df, summary=None):
    if summary is not None:
        print("Rows by cleaning stage:")
        for stage in ['Original', 'Complete Cases', 'Positive Deadlift', 'Year Filter']:
            print(f"  {stage}: {summary[stage]}")
        print("Missing values before filtering:")
        print(summary['missing_by_column'])
        print(f"Year range: {summary['year_range']}")

    desc = describe_dataset(df)
    print("\nContinuous summary:")
    print(desc['continuous'].round(2))
    for col in config.CATEGORICAL:
        print(f"\n{col} levels:")
        print(desc['level_counts'][col])
        print(f"{config.TARGET} by {col}:")
        print(desc['target_by_level'][col])

    print("\nCorrelation matrix (Pearson):")
    print(correlation_matrix(df).round(3))
    print("\nCorrelation with target:")
    print(target_correlations(df).round(4))
    print("\nOne-way ANOVA:")
    print(anova_by_category(df).round(4))
