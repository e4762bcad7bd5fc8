import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import MinMaxScaler

import config


def merge_personal_record(df, personal):
    """Append the personal record as the last row so it shares the scaling."""
    return pd.concat([df[config.FEATURE_COLUMNS], personal[config.FEATURE_COLUMNS]],
                     ignore_index=True)


def encode_features(df):
    """
    One-hot encode the categoricals without an intercept: the first keeps
    every level, the rest drop their first level. Continuous columns and the
    target are carried through unchanged.
    """
    first, *rest = config.CATEGORICAL
    parts = [pd.get_dummies(df[first], prefix=first, dtype=float)]
    for col in rest:
        parts.append(pd.get_dummies(df[col], prefix=col, drop_first=True, dtype=float))
    parts.append(df[config.CONTINUOUS + [config.TARGET]].astype(float))
    return pd.concat(parts, axis=1)


def indicator_columns(encoded):
    return [c for c in encoded.columns if c not in config.CONTINUOUS + [config.TARGET]]


class MinMaxNormalizer:
    """Min-max scaling of the continuous predictors and, separately, the target."""

    def __init__(self, columns=None, target=config.TARGET):
        self.columns = columns or list(config.CONTINUOUS)
        self.target = target
        self.feature_scaler = MinMaxScaler()
        self.target_scaler = MinMaxScaler()

    def fit(self, df):
        # NaNs are ignored when fitting, e.g. a blank personal deadlift
        self.feature_scaler.fit(df[self.columns])
        self.target_scaler.fit(df[[self.target]])
        return self

    def transform(self, df):
        out = df.copy()
        out[self.columns] = self.feature_scaler.transform(df[self.columns])
        out[self.target] = self.target_scaler.transform(df[[self.target]]).ravel()
        return out

    def fit_transform(self, df):
        return self.fit(df).transform(df)

    def inverse_target(self, values):
        values = np.asarray(values, dtype=float).reshape(-1, 1)
        return self.target_scaler.inverse_transform(values).ravel()


def split_personal_row(encoded):
    """Remove the personal record (last row) and return it separately."""
    return encoded.iloc[:-1], encoded.iloc[[-1]]


def train_test_split_frame(df, train_fraction=config.TRAIN_FRACTION,
                           random_state=config.RANDOM_STATE):
    n_train = int(round(train_fraction * len(df)))
    if not 0 < n_train < len(df):
        raise ValueError(f"cannot split {len(df)} rows into non-empty train and test sets")
    return train_test_split(df, train_size=n_train, random_state=random_state)


def to_arrays(encoded):
    X = encoded.drop(columns=[config.TARGET]).to_numpy(dtype='float32')
    y = encoded[config.TARGET].to_numpy(dtype='float32')
    return X, y
