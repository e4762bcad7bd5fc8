import numpy as np

import config
from data_prep import prepare_dataset
from stats_report import (anova_by_category, correlation_matrix, describe_dataset,
                          print_report, target_correlations)


def test_correlation_matrix_symmetric_unit_diagonal(competitions):
    data, _ = prepare_dataset(competitions)
    corr = correlation_matrix(data)
    assert list(corr.columns) == config.CORRELATION_COLUMNS
    assert np.allclose(corr.values, corr.values.T)
    assert np.allclose(np.diag(corr.values), 1.0)


def test_correlation_matrix_pairwise_complete(toy_data):
    df = toy_data.copy()
    df.loc[0, 'Age'] = np.nan
    corr = correlation_matrix(df)
    assert not corr.isnull().values.any()


def test_anova_p_values_in_unit_interval(competitions):
    data, _ = prepare_dataset(competitions)
    anova = anova_by_category(data)
    assert list(anova.index) == config.CATEGORICAL
    assert anova['p'].between(0, 1).all()
    assert anova.loc['Sex', 'Levels'] == 2
    assert anova.loc['Equipment', 'Levels'] == 3
    assert anova.loc['Equipment', 'df_between'] == 2


def test_anova_single_level_is_nan(toy_data):
    df = toy_data.copy()
    df['Equipment'] = 'Raw'
    anova = anova_by_category(df)
    assert np.isnan(anova.loc['Equipment', 'F'])
    assert np.isnan(anova.loc['Equipment', 'p'])
    assert not np.isnan(anova.loc['Sex', 'p'])


def test_target_correlations(competitions):
    data, _ = prepare_dataset(competitions)
    tc = target_correlations(data)
    assert config.TARGET not in tc.index
    assert tc['r'].between(-1, 1).all()
    assert tc['p'].between(0, 1).all()
    # lift is generated proportional to bodyweight
    assert tc.loc['BodyweightKg', 'r'] > 0.5


def test_describe_dataset(toy_data):
    desc = describe_dataset(toy_data)
    assert desc['continuous'].loc['count', 'Age'] == 5
    assert desc['level_counts']['Sex']['M'] == 3
    assert desc['target_by_level']['Sex'].loc['F', 'mean'] == 115.0


def test_print_report(toy_raw, capsys):
    data, summary = prepare_dataset(toy_raw)
    print_report(data, summary)
    out = capsys.readouterr().out
    assert 'Year Filter: 5' in out
    assert 'One-way ANOVA' in out
