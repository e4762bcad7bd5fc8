import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

import config


@pytest.fixture
def toy_raw():
    # rows 6-9 are dropped: pre-2010, missing age, failed lift, missing date
    return pd.DataFrame({
        'Name': ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I'],
        'Sex': ['M', 'F', 'M', 'F', 'M', 'M', 'F', 'M', 'F'],
        'Equipment': ['Raw', 'Raw', 'Wraps', 'Wraps', 'Raw', 'Raw', 'Wraps', 'Raw', 'Raw'],
        'Age': [25, 30, 35, 28, 40, 22, np.nan, 33, 27],
        'BodyweightKg': [80.0, 60.0, 90.0, 55.0, 100.0, 75.0, 58.0, 85.0, 62.0],
        'Best3DeadliftKg': [200.0, 120.0, 230.0, 110.0, 250.0, 180.0, 115.0, -210.0, 125.0],
        'Date': ['2015-03-01', '2012-06-10', '2018-01-20', '2011-09-09', '2019-05-05',
                 '2008-04-04', '2016-02-02', '2017-07-07', np.nan],
        'Federation': ['USAPL'] * 9,
    })


@pytest.fixture
def toy_data(toy_raw):
    from data_prep import prepare_dataset
    data, _ = prepare_dataset(toy_raw)
    return data


@pytest.fixture
def personal():
    return pd.DataFrame({
        'Name': ['Me'], 'Sex': ['M'], 'Equipment': ['Raw'],
        'Age': [29.0], 'BodyweightKg': [82.5], 'Best3DeadliftKg': [np.nan], 'Year': [2024.0],
    })


@pytest.fixture
def competitions():
    rng = np.random.default_rng(0)
    n = 80
    sex = rng.choice(['M', 'F'], size=n)
    equipment = rng.choice(['Raw', 'Wraps', 'Single-ply'], size=n)
    age = rng.integers(18, 60, size=n).astype(float)
    bodyweight = np.where(sex == 'M', rng.uniform(60, 120, n), rng.uniform(47, 90, n)).round(1)
    lift = bodyweight * np.where(sex == 'M', 2.3, 1.8) * np.where(equipment == 'Raw', 1.0, 1.08)
    lift = (lift * rng.uniform(0.85, 1.15, n)).round(1)
    years = rng.integers(2006, 2024, size=n)
    return pd.DataFrame({
        'Name': [f'Lifter {i}' for i in range(n)],
        'Sex': sex,
        'Equipment': equipment,
        'Age': age,
        'BodyweightKg': bodyweight,
        'Best3DeadliftKg': lift,
        'Date': [f'{y}-06-15' for y in years],
    })


@pytest.fixture
def csv_paths(tmp_path, competitions, personal):
    data_path = tmp_path / 'competitions.csv'
    personal_path = tmp_path / 'personal.csv'
    competitions.to_csv(data_path, index=False)
    personal[config.FEATURE_COLUMNS].to_csv(personal_path, index=False)
    return data_path, personal_path
