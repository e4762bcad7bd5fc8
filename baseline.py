import logging

import numpy as np
import pandas as pd
from sklearn.ensemble import RandomForestRegressor
from sklearn.metrics import mean_squared_error
from sklearn.preprocessing import LabelEncoder

import config

logger = logging.getLogger(__name__)


def encode_predictors(df):
    """Label encode Sex and Equipment so the trees can split on them."""
    X = df[config.PREDICTORS].copy()
    encoders = {}
    for col in config.CATEGORICAL:
        le = LabelEncoder()
        X[col] = le.fit_transform(X[col].astype(str))
        encoders[col] = le
    return X, encoders


def fit_random_forest(df, n_estimators=config.N_ESTIMATORS, random_state=config.RANDOM_STATE):
    """
    Fit the random forest baseline on Age, BodyweightKg, Sex and Equipment.

    Error is measured out of bag, so every row is used for fitting.
    """
    X, encoders = encode_predictors(df)
    y = df[config.TARGET].values

    rf_reg = RandomForestRegressor(n_estimators=n_estimators, oob_score=True,
                                   random_state=random_state)
    rf_reg.fit(X, y)

    oob_mse = mean_squared_error(y, rf_reg.oob_prediction_)
    var_explained = (1 - oob_mse / np.var(y)) * 100
    importances = pd.Series(rf_reg.feature_importances_, index=config.PREDICTORS,
                            name='Importance').sort_values(ascending=False)
    logger.info("Random forest fitted: %d trees, OOB MSE %.2f", n_estimators, oob_mse)

    results = {
        'MSE': oob_mse,
        'RMSE': np.sqrt(oob_mse),
        '% Var Explained': var_explained,
        'importances': importances,
    }
    return results, rf_reg, encoders


def print_baseline(results):
    print("\nRandom forest baseline:")
    print(f"  Mean of squared residuals (OOB): {results['MSE']:.2f}")
    print(f"  RMSE (OOB): {results['RMSE']:.2f} kg")
    print(f"  % Var explained: {results['% Var Explained']:.2f}")
    print("  Feature importance (impurity):")
    for feature, importance in results['importances'].items():
        print(f"    {feature}: {importance:.3f}")
