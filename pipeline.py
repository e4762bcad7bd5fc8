"""
Deadlift analysis pipeline.

Loads the OpenPowerlifting export, reports descriptive statistics,
correlations and ANOVA, fits a random forest baseline, then trains a small
dense network and applies it to one personal record. Run top to bottom:

    python pipeline.py
"""
import logging
from dataclasses import dataclass, field

import matplotlib.pyplot as plt
import pandas as pd

import config
import plots
from baseline import fit_random_forest, print_baseline
from data_prep import load_competitions, load_personal_record, prepare_dataset
from network import evaluate_network, predict_personal, train_network
from preprocessing import (MinMaxNormalizer, encode_features, merge_personal_record,
                           split_personal_row, to_arrays, train_test_split_frame)
from stats_report import anova_by_category, correlation_matrix, print_report

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    raw: pd.DataFrame
    data: pd.DataFrame
    summary: dict
    correlation: pd.DataFrame
    anova: pd.DataFrame
    rf_results: dict
    encoded: pd.DataFrame
    personal_row: pd.DataFrame
    train: pd.DataFrame
    test: pd.DataFrame
    history: dict
    nn_results: dict
    prediction_kg: float
    prediction_lbs: float
    normalizer: MinMaxNormalizer = field(repr=False, default=None)


def run_pipeline(data_path=config.DATA_PATH, personal_path=config.PERSONAL_PATH,
                 year_cutoff=config.YEAR_CUTOFF, epochs=config.EPOCHS,
                 random_state=config.RANDOM_STATE, verbose=0, report=True):
    raw = load_competitions(data_path)
    personal = load_personal_record(personal_path)

    data, summary = prepare_dataset(raw, year_cutoff=year_cutoff)
    if report:
        print_report(data, summary)
    corr = correlation_matrix(data)
    anova = anova_by_category(data)

    rf_results, _, _ = fit_random_forest(data, random_state=random_state)
    if report:
        print_baseline(rf_results)

    merged = merge_personal_record(data, personal)
    normalizer = MinMaxNormalizer()
    encoded = normalizer.fit_transform(encode_features(merged))
    encoded, personal_row = split_personal_row(encoded)

    train, test = train_test_split_frame(encoded, random_state=random_state)
    logger.info("Split %d rows into %d train / %d test", len(encoded), len(train), len(test))
    X_train, y_train = to_arrays(train)
    X_test, y_test = to_arrays(test)
    personal_X, _ = to_arrays(personal_row)

    model, history = train_network(X_train, y_train, epochs=epochs, seed=random_state,
                                   verbose=verbose)
    nn_results = evaluate_network(model, X_test, y_test, normalizer)
    kg, lbs = predict_personal(model, personal_X, normalizer)

    if report:
        print("\nNeural network (test set):")
        print(f"  Loss (MSE, normalized): {nn_results['MSE']:.4f}")
        print(f"  MAE (normalized): {nn_results['MAE']:.4f}")
        print(f"  RMSE: {nn_results['RMSE (kg)']:.2f} kg")
        print("\nPredicted deadlift:")
        print(f"{kg:.2f} kg")
        print(f"{lbs:.2f} lbs")

    return PipelineResult(raw=raw, data=data, summary=summary, correlation=corr, anova=anova,
                          rf_results=rf_results, encoded=encoded, personal_row=personal_row,
                          train=train, test=test, history=history, nn_results=nn_results,
                          prediction_kg=kg, prediction_lbs=lbs, normalizer=normalizer)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    result = run_pipeline(verbose=1)

    plots.missing_heatmap(result.raw)
    plots.deadlift_histogram(result.data)
    plots.category_boxplots(result.data)
    plots.correlation_heatmap(result.correlation)
    plots.importance_bar(result.rf_results['importances'])
    plots.plot_training_history(result.history)
    plt.show()


if __name__ == "__main__":
    main()
