import matplotlib.pyplot as plt
import seaborn as sns

import config


def missing_heatmap(raw):
    fig, ax = plt.subplots(figsize=(12, 6))
    sns.heatmap(raw[config.RAW_COLUMNS].isna(), cmap="magma", cbar=False, ax=ax)
    ax.set_title("Missing - Competition Records")
    return fig


def deadlift_histogram(df):
    fig, ax = plt.subplots(figsize=(10, 5))
    sns.histplot(df[config.TARGET], bins=40, ax=ax)
    ax.set_title("Best Deadlift Distribution")
    ax.set_xlabel("Best3DeadliftKg")
    return fig


def category_boxplots(df):
    fig, axes = plt.subplots(1, len(config.CATEGORICAL), figsize=(14, 5))
    for ax, col in zip(axes, config.CATEGORICAL):
        sns.boxplot(data=df, x=col, y=config.TARGET, ax=ax)
        ax.set_title(f"Deadlift by {col}")
    return fig


def correlation_heatmap(corr):
    fig, ax = plt.subplots(figsize=(7, 6))
    sns.heatmap(corr, annot=True, fmt=".2f", cmap="viridis", vmin=-1, vmax=1, ax=ax)
    ax.set_title("Correlation Heatmap")
    return fig


def importance_bar(importances):
    fig, ax = plt.subplots(figsize=(8, 4))
    sns.barplot(x=importances.values, y=importances.index, ax=ax)
    ax.set_title("Random Forest Feature Importance")
    ax.set_xlabel("Impurity importance")
    return fig


def plot_training_history(history):
    fig, ax = plt.subplots(figsize=(10, 5))
    epochs = range(1, len(history['loss']) + 1)
    ax.plot(epochs, history['loss'], label='loss')
    if 'val_loss' in history:
        ax.plot(epochs, history['val_loss'], label='val_loss')
    ax.set_title("Training History")
    ax.set_xlabel("Epoch")
    ax.set_ylabel("MSE (normalized)")
    ax.legend()
    return fig
