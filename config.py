# Paths and fixed parameters for the deadlift analysis pipeline.

DATA_PATH = 'data/openpowerlifting_sample.csv'
PERSONAL_PATH = 'data/personal_record.csv'

NAME = 'Name'
SEX = 'Sex'
EQUIPMENT = 'Equipment'
AGE = 'Age'
BODYWEIGHT = 'BodyweightKg'
TARGET = 'Best3DeadliftKg'
DATE = 'Date'
YEAR = 'Year'

RAW_COLUMNS = [NAME, SEX, EQUIPMENT, AGE, BODYWEIGHT, TARGET, DATE]
FEATURE_COLUMNS = [NAME, SEX, EQUIPMENT, AGE, BODYWEIGHT, TARGET, YEAR]
CATEGORICAL = [SEX, EQUIPMENT]
CONTINUOUS = [AGE, BODYWEIGHT]
CORRELATION_COLUMNS = [AGE, BODYWEIGHT, TARGET, YEAR]
PREDICTORS = [AGE, BODYWEIGHT, SEX, EQUIPMENT]

YEAR_CUTOFF = 2010
RANDOM_STATE = 42

N_ESTIMATORS = 100

TRAIN_FRACTION = 0.8
VALIDATION_SPLIT = 0.2
EPOCHS = 50
BATCH_SIZE = 16
PATIENCE = 5

KG_TO_LBS = 2.20462262185
