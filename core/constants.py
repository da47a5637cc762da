"""
Constants for employee record parsing and hierarchy validation.
"""

# Expected columns per CSV row: employee, manager, salary
EXPECTED_FIELD_COUNT = 3

FIELD_SEPARATOR = ','

# Employee/manager tokens, matched after trimming and lower-casing
EMPLOYEE_ID_PREFIX = 'employee'
EMPLOYEE_ID_PATTERN = rf'^{EMPLOYEE_ID_PREFIX}([0-9]+)$'

# Salary tokens, matched after trimming
SALARY_PATTERN = r'^[0-9]+$'

MIN_EMPLOYEE_ID = 1
MIN_SALARY = 1

# Human-readable messages, keyed by error kind value
ERROR_MESSAGES = {
    'InvalidFormat': (
        'Invalid number of columns in csv file, '
        'only 3 columns per row were expected'
    ),
    'InvalidEmployeeId': (
        'Invalid Employee Id: Input must be an integer greater than zero'
    ),
    'InvalidSalary': (
        'Invalid Salary: Input must be an integer greater than zero'
    ),
    'CircularReference': (
        'Circular Reference Error: Two employees cannot be each others manager'
    ),
    'CeoNotDefined': (
        'CEO is not defined. This must be an employee or manager without a manager'
    ),
    'MultipleCeosDefined': (
        'Multiple CEOS have been defined where as only one was expected'
    ),
    'EmployeeNotFound': (
        'The employee/manager with the corresponding id does not exist '
        'in the list of employees'
    ),
    'DuplicateEmployee': (
        'An employee has appeared more than once in the list'
    ),
}

# Display format for an employee id (inverse of EMPLOYEE_ID_PATTERN)
EMPLOYEE_DISPLAY_FORMAT = 'Employee{id}'
