import logging

import numpy as np
from tensorflow import keras

import config

logger = logging.getLogger(__name__)


def build_network(n_features):
    model = keras.Sequential([
        keras.Input(shape=(n_features,)),
        keras.layers.Dense(16, activation='relu'),
        keras.layers.Dense(8, activation='relu'),
        keras.layers.Dense(1)  # normalized deadlift
    ])
    model.compile(optimizer='adam', loss='mse', metrics=['mae'])
    return model


def train_network(X_train, y_train, epochs=config.EPOCHS, batch_size=config.BATCH_SIZE,
                  validation_split=config.VALIDATION_SPLIT, patience=config.PATIENCE,
                  seed=config.RANDOM_STATE, verbose=0):
    """
    Train the 16-8-1 regression network with early stopping on val_loss.
    The best weights seen are restored when training stops.

    Returns the model and its history dict (loss, val_loss, mae, val_mae).
    """
    keras.utils.set_random_seed(seed)
    model = build_network(X_train.shape[1])
    early_stop = keras.callbacks.EarlyStopping(monitor='val_loss', patience=patience,
                                               restore_best_weights=True)
    history = model.fit(X_train, y_train, epochs=epochs, batch_size=batch_size,
                        validation_split=validation_split, callbacks=[early_stop],
                        verbose=verbose)
    logger.info("Network trained for %d epochs", len(history.history['loss']))
    return model, history.history


def evaluate_network(model, X_test, y_test, normalizer):
    loss, mae = model.evaluate(X_test, y_test, verbose=0)
    pred_kg = normalizer.inverse_target(model.predict(X_test, verbose=0))
    true_kg = normalizer.inverse_target(y_test)
    rmse_kg = float(np.sqrt(np.mean((pred_kg - true_kg) ** 2)))
    return {'MSE': float(loss), 'MAE': float(mae), 'RMSE (kg)': rmse_kg}


def predict_personal(model, personal_X, normalizer):
    """Predict the personal deadlift and return it in kg and lbs."""
    scaled = model.predict(personal_X, verbose=0)
    kg = float(normalizer.inverse_target(scaled)[0])
    return kg, kg * config.KG_TO_LBS
