from pipe_heating.calculator import evaluate, make_inputs
from pipe_heating.power_opt import find_min_power


def make_test_inputs():
    return make_inputs(volume_liters=10.0, target_temp_c=60.0, target_duration_s=900.0, step_s=5.0)


def test_min_power_between_ideal_and_required():
    inputs = make_test_inputs()
    res = evaluate(inputs)

    opt = find_min_power(inputs, P_high=2.0 * res.required_power_w)
    assert opt.reached
    assert opt.reach_time_s <= inputs.process.target_duration_s
    assert res.ideal_power_w < opt.power_w <= res.required_power_w


def test_unreachable_upper_bound():
    inputs = make_test_inputs()
    res = evaluate(inputs)

    opt = find_min_power(inputs, P_high=0.5 * res.ideal_power_w, iters=5)
    assert not opt.reached
    assert opt.power_w == 0.5 * res.ideal_power_w


def test_reach_time_within_duration_when_step_does_not_divide_it():
    inputs = make_inputs(volume_liters=10.0, target_temp_c=60.0, target_duration_s=900.0, step_s=7.0)
    res = evaluate(inputs)

    opt = find_min_power(inputs, P_high=2.0 * res.required_power_w)
    assert opt.reached
    assert opt.reach_time_s <= inputs.process.target_duration_s
